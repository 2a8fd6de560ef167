"""Event object handed to component handlers."""
from __future__ import annotations

from typing import Any


class ComponentEvent:
    """Carries the event name, its payload as attributes, and a cancel flag."""

    def __init__(self, type: str, **data: Any) -> None:
        self.type = type
        self._canceled = False
        for key, value in data.items():
            setattr(self, key, value)

    def stop(self) -> None:
        self._canceled = True

    def is_stop(self) -> bool:
        return self._canceled

    def __repr__(self) -> str:
        return f"ComponentEvent({self.type!r})"
