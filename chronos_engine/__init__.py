"""Core runtime pieces of a small game engine: arguments, settings, binary encoding, timing, logging and worker threads."""

__version__ = "0.1.0"