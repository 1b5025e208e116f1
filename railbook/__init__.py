"""Railway ticket search, booking and live status service"""

__version__ = "1.0.0"
