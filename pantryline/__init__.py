"""pantryline - restaurant supply inventory text parsing."""

__version__ = "0.1.0"
