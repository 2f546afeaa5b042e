"""GymBro: swipe-based training partner matching."""

__version__ = "1.0.0"
