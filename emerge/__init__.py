"""Force-directed layout and live pygame drawing of small directed graphs."""

__version__ = "0.1.0"
__all__ = ["__version__"]