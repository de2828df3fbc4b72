"""Block stacking game groundwork: tilt input, gravity, scoring and a pygame window."""

__version__ = "0.1.0"