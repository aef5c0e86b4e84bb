"""Small utilities for strings, paths, guards, buffers, numerics, binary data, formatting and sockets."""

__version__ = "0.1.0"