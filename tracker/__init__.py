"""
Workout tracker package.

This package calculates distance, average speed and calories burned
for running, walking and swimming workouts, and renders, exports and
charts the results.
"""

__version__ = "0.1.0"
