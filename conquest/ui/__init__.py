"""
User interface module for the conquest simulator.
"""
