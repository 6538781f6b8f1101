"""robotsim — grid-bound robot simulator CLI."""

__version__ = "0.1.0"
