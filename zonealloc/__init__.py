"""Zone-based memory allocator on a simulated address space, with text and number utilities."""

__version__ = "0.1.0"