"""Searching, sorting, a sort benchmark, circular linked lists, a bounded queue and binary trees."""

__version__ = "0.1.0"