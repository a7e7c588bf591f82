"""Configuration management service: environments and their variables."""
__version__ = "1.0.0"
