"""sprint - terminal countdown timer.

Asks for a number of minutes, then counts down once per second and
overwrites a status file with the remaining ``MM:SS`` on every tick.
"""

__version__ = "0.1.0"
