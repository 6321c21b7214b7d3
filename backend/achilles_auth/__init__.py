"""
Achilles Auth - email one-time passcode authentication backend.
"""

__version__ = "0.1.0"
