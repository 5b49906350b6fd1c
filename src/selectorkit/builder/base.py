"""Base protocol for anything that renders to selector text."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Stringifiable(Protocol):
    """An object that can be rendered as CSS selector text."""

    def stringify(self) -> str: ...
