"""Small algorithms and text utilities: line search, linked lists, regex matching, medians and threads."""

__version__ = "0.1.0"