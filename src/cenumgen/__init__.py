"""cenumgen - generate Swift enums from the #define constants of C headers."""

__version__ = "0.1.0"
