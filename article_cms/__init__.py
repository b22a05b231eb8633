"""Multilingual article store with paginated cross-locale listing."""

__version__ = "1.0.0"
