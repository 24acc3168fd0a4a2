"""Count effective lines, keywords and comments in C-like source files with worker threads."""

__version__ = "0.1.0"