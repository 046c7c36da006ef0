"""Color schemes, text filters and hotspots, combined-character keys and history search for terminal emulators."""

__version__ = "0.1.0"