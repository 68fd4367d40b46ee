"""
Domain entities for the confessions bounded context.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Confession:
    """A stored confession.

    Attributes:
        id: Identifier assigned by storage on creation.
        content: The confession text. May be empty, never absent.
    """

    id: int
    content: str


@dataclass(frozen=True)
class NewConfession:
    """Transient input used to create a Confession at insert time."""

    content: str
