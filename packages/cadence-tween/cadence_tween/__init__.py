"""cadence-tween - Easing curves and value interpolators for cadence transitions."""
from __future__ import annotations

from cadence_tween.easing import EASINGS, make_effect, resolve_easing

__all__ = ["EASINGS", "make_effect", "resolve_easing"]
