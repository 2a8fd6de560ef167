"""cadence-signal - Option bag and synchronous event emitter for cadence units."""
from __future__ import annotations

from cadence_signal.component import Component
from cadence_signal.event import ComponentEvent

__all__ = ["Component", "ComponentEvent"]
