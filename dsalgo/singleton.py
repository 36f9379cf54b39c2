"""A class that allows at most one live instance at a time."""

from __future__ import annotations

from typing import ClassVar, Optional

_CREATE = object()


class Singleton:
    """A class with a single shared instance.

    Instances cannot be made directly; use :meth:`get_instance`.
    """

    _instance: ClassVar[Optional[Singleton]] = None

    def __init__(self, *, _key=None):
        if _key is not _CREATE:
            raise TypeError("use Singleton.get_instance() to create the instance")

    @classmethod
    def get_instance(cls) -> Optional[Singleton]:
        """Create and return the instance.

        If an instance already exists, nothing is created and None is
        returned.
        """
        if cls._instance is None:
            cls._instance = cls(_key=_CREATE)
            return cls._instance
        return None

    @classmethod
    def release_instance(cls) -> None:
        """Drop the current instance, if any, so a new one can be created."""
        cls._instance = None