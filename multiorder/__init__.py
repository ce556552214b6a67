"""A container that can be traversed in several different orders, with a small demo."""

__version__ = "0.1.0"
__all__ = ["container", "demo"]