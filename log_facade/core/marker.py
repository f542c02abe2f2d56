"""
Markers - named tags attached to a log call, independent of level

A marker may reference other markers, so a filter keyed on a parent
marker also matches calls tagged with any of its children.
"""

from __future__ import annotations
import threading
from typing import Dict, Iterator, Tuple, Union


class Marker:
    """
    Named marker with an optional set of referenced markers.

    Equality and hashing use the name only. The reference set is
    copy-on-write, so iteration never sees a half-applied add/remove.
    """

    def __init__(self, name: str):
        if not isinstance(name, str) or not name:
            raise ValueError("marker name must be a non-empty string")
        self._name = name
        self._children: Tuple[Marker, ...] = ()
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    def add(self, marker: "Marker") -> bool:
        """Add a reference; return False if it was already present."""
        with self._lock:
            if marker in self._children:
                return False
            self._children = self._children + (marker,)
            return True

    def remove(self, marker: "Marker") -> bool:
        """Remove a reference; return False if it was not present."""
        with self._lock:
            if marker not in self._children:
                return False
            self._children = tuple(m for m in self._children if m != marker)
            return True

    def is_or_contains(self, marker: Union["Marker", str]) -> bool:
        """
        Check whether this marker is, or directly references, ``marker``.

        Args:
            marker: Marker instance or marker name

        Returns:
            True on a match by name, here or among the direct references
        """
        name = marker if isinstance(marker, str) else marker.name
        if self._name == name:
            return True
        return any(child.name == name for child in self._children)

    def __iter__(self) -> Iterator["Marker"]:
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Marker):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        children = self._children
        if not children:
            return self._name
        return f"{self._name}[{','.join(str(c) for c in children)}]"

    def __repr__(self) -> str:
        return f"Marker(name='{self._name}')"


class MarkerFactory:
    """
    Interning registry for markers.

    ``get`` returns the same instance for the same name for the life of
    the factory, until the name is orphaned.
    """

    def __init__(self):
        self._markers: Dict[str, Marker] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> Marker:
        """Get or create the marker registered under ``name``."""
        with self._lock:
            marker = self._markers.get(name)
            if marker is None:
                marker = Marker(name)
                self._markers[name] = marker
            return marker

    def exists(self, name: str) -> bool:
        with self._lock:
            return name in self._markers

    def orphan(self, name: str) -> bool:
        """Drop ``name`` from the registry; existing references stay valid."""
        with self._lock:
            return self._markers.pop(name, None) is not None

    def make_orphan(self, name: str) -> Marker:
        """Create a marker that is not registered."""
        return Marker(name)


_default_factory = MarkerFactory()


def get_marker(name: str) -> Marker:
    """Get or create a process-wide marker by name."""
    return _default_factory.get(name)
