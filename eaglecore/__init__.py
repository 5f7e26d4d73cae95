"""Core building blocks for a small game engine: events, input, layers, buffers, files and an application loop."""

__version__ = "0.1.0"