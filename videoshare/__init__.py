"""VideoShare: video sharing service API."""

__version__ = "1.0.0"
