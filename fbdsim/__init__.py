"""Function block diagram simulation: blocks, connections, a stepping engine and a command line."""

__version__ = "0.1.0"