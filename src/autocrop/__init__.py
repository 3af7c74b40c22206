"""
Autocrop - difference a batch of images against a background and crop out what changed.
"""

__version__ = "0.1.0"
