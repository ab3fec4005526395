"""Cell buffers, constraint layout, a double-buffered terminal and widgets for terminal UIs."""

__version__ = "0.1.0"