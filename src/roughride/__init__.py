"""Road roughness mapping from GPS and accelerometer samples."""

__version__ = "0.1.0"
