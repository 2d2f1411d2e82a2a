"""log-strip - find and remove debug statements from JavaScript-family sources."""

__version__ = "1.0.0"
