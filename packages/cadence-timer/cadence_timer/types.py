"""Shared errors, callback kinds and duration coercion for cadence timers."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Union

from cadence_signal import Component

Payload = dict[str, Any]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class AbstractMethodError(NotImplementedError):
    """Raised when an abstract Animation method is called on the base class."""

    def __init__(self, cls_name: str, method: str) -> None:
        self.method = method
        super().__init__(f"abstract method {cls_name}.{method}() invoked")


class InvalidDurationError(ValueError):
    """Raised when a duration cannot be coerced to whole milliseconds."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid duration {value!r}, expected milliseconds")


class UnknownTimerTypeError(ValueError):
    """Raised by Timeline.add for an unknown timer kind."""

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(f"{kind!r} timer is not defined")


def coerce_duration(value: Any) -> int:
    """Truncate a duration to whole milliseconds.

    Accepts ints, finite floats and strings starting with an integer
    (``"250"``, ``"250ms"``). Anything else raises InvalidDurationError.
    """
    if isinstance(value, bool):
        raise InvalidDurationError(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidDurationError(value)
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            raise InvalidDurationError(value)
        return int(match.group(1))
    raise InvalidDurationError(value)


@dataclass(frozen=True)
class FunctionCallback:
    """Plain function callback, called with the payload dict."""

    fn: Callable[[Payload], Any]

    def __call__(self, payload: Payload) -> None:
        self.fn(payload)


def _setter_for(target: Any) -> Callable[[str, Any], Any]:
    if isinstance(target, Component):
        return target.set
    return lambda name, value: setattr(target, name, value)


def _getter_for(target: Any) -> Callable[[str], Any]:
    if isinstance(target, Component):
        return target.get
    return lambda name: getattr(target, name)


@dataclass(frozen=True)
class AttributeBinding:
    """Writes ``payload["value"]`` onto named attributes of one or more targets.

    With several names a sequence value is spread positionally, a scalar
    value is written to every name.
    """

    targets: tuple[Any, ...]
    names: tuple[str, ...]
    multiple: bool = False
    _setters: tuple[Callable[[str, Any], Any], ...] = field(
        init=False, repr=False, compare=False
    )
    _getters: tuple[Callable[[str], Any], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "_setters", tuple(_setter_for(t) for t in self.targets))
        object.__setattr__(self, "_getters", tuple(_getter_for(t) for t in self.targets))

    def __call__(self, payload: Payload) -> None:
        value = payload.get("value")
        if self.multiple:
            spread = isinstance(value, (list, tuple))
            updates = [
                (name, value[i] if spread else value)
                for i, name in enumerate(self.names)
            ]
        else:
            updates = [(self.names[0], value)]

        for setter in self._setters:
            for name, val in updates:
                setter(name, val)

    def read(self) -> Any:
        """Current values of the bound names on the first target."""
        getter = self._getters[0]
        if self.multiple:
            return [getter(name) for name in self.names]
        return getter(self.names[0])


Callback = Union[FunctionCallback, AttributeBinding]


def make_callback(callback: Any, set_option: Any) -> Callback | None:
    """Decide the callback kind once, at construction time."""
    if callback is None:
        return None
    if callable(callback):
        return FunctionCallback(callback)
    if set_option:
        targets = tuple(callback) if isinstance(callback, (list, tuple)) else (callback,)
        if isinstance(set_option, (list, tuple)):
            return AttributeBinding(targets, tuple(set_option), multiple=True)
        return AttributeBinding(targets, (set_option,))
    raise TypeError(
        f"callback must be callable or bound with a 'set' option, got {type(callback).__name__}"
    )
