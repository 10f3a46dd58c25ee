"""Capability shared by everything that can be announced."""

from typing import Protocol, runtime_checkable

__all__ = ["Announcer"]


@runtime_checkable
class Announcer(Protocol):
    """Something with a sound that can announce itself on stdout.

    Attributes:
        sound: (str) The sound this thing makes, fixed at construction
    """

    @property
    def sound(self) -> str: ...

    def announce(self) -> None: ...
