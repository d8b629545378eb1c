"""rollr: roll dice and flip coins from the command line."""

__version__ = "0.1.0"
