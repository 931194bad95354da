"""Dark Pig Git - commit graph viewer"""

__version__ = "0.1.0"
