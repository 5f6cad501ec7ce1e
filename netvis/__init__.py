"""Read edge-list networks, lay them out, and explore them in a Tk window."""

__version__ = "0.1.0"
__all__ = ["model", "reader", "layout", "session", "viewport", "app"]