"""Display models, keyboard controls and timing helpers for an emulated 8-bit computer."""

__version__ = "0.1.0"

__all__ = ["keyboard", "models", "timesource", "utils"]