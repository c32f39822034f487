"""Terminal stock control with products, movements and weighted average cost."""

__version__ = "1.0.0"
__all__ = ["__version__"]