#!/usr/bin/env python3
"""
Dark Pig Git - commit graph viewer

This is a convenience wrapper for running from the repo root.
The actual entry point is darkpig.main:main (for pip install).
"""

from darkpig.main import main

if __name__ == "__main__":
    main()
