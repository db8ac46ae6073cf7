"""Project Euler solutions for problems up to 45, a puzzle-answer command and small arithmetic tools."""

__version__ = "0.1.0"