"""Remove compiled Rust executables that sit next to their sources."""

__version__ = "0.1.0"
