"""BrutNet - French gross/net salary and income tax estimates."""

__version__ = "0.3.0"
