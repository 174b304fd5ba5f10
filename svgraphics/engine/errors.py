"""Compile error taxonomy.

Zero-length geometry is not an error: the tessellator returns None and the
element is dropped.
"""

from __future__ import annotations


class MalformedPathError(ValueError):
    """Path data violates the command grammar or a command's argument arity."""


class InvalidInputError(ValueError):
    """Input has no recognizable <svg> root element."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
