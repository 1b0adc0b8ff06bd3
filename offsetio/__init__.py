"""Reading and writing at an offset without moving a file position."""

__version__ = "0.3.4"

__all__ = ["base", "buffers", "files", "slice", "cursor", "byteio"]