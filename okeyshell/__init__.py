"""An interactive shell front end that parses command lines into syntax trees."""

__version__ = "0.1.0"