"""Classic algorithms on integer lists, matrices and singly linked lists."""

__version__ = "0.1.0"