"""
Random number sources for the conquest simulator.

Every random draw of the game (combat dice, mission selection and initial
troop counts) goes through a RandomSource, so a game can be seeded or
driven by a fixed script of values.
"""

import random
from collections import deque
from collections.abc import Iterable

from conquest.core.constants import DIE_MAX, DIE_MIN


class RandomSource:
    """
    Uniform random-integer source backed by its own random.Random instance.

    Attributes:
        seed (int | None):
            The seed the source was created with, None for an OS-seeded source.

    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        """
        Draws an integer uniformly from the inclusive range [low, high].

        Args:
            low (int): Lower bound (inclusive).
            high (int): Upper bound (inclusive).

        Returns:
            int: The drawn value.

        """
        return self._random.randint(low, high)

    def roll_die(self) -> int:
        """Rolls one six-sided combat die."""
        return self.randint(DIE_MIN, DIE_MAX)


class ScriptedRandomSource(RandomSource):
    """
    Random source that replays a fixed sequence of values.

    Each draw consumes the next value of the script, which must fall inside
    the requested range. Useful to replay a game or to force dice results.
    """

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(seed=None)
        self._values: deque[int] = deque(values)

    @property
    def remaining(self) -> int:
        """Number of scripted values not drawn yet."""
        return len(self._values)

    def push(self, *values: int) -> None:
        """Appends values to the end of the script."""
        self._values.extend(values)

    def randint(self, low: int, high: int) -> int:
        if not self._values:
            raise ValueError(f"Scripted random source exhausted (range [{low}, {high}])")
        value = self._values.popleft()
        if not low <= value <= high:
            raise ValueError(
                f"Scripted value {value} outside requested range [{low}, {high}]"
            )
        return value
