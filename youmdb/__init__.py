"""YouMDB — discover, rate and review YouTube creators."""

__version__ = "1.0.0"
