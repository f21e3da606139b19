"""Side-scrolling asteroid shooter"""

__version__ = "0.1.0"
