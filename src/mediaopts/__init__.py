"""mediaopts: bind media command line options to typed values."""

__version__ = "0.1.0"
