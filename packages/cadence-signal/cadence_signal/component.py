"""Component - option storage plus in-process event dispatch."""
from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, Callable

from cadence_signal.event import ComponentEvent

_Handler = Callable[[ComponentEvent], Any]

_MISSING = object()


class Component:
    """Base for anything that carries options and fires events.

    The first ``option(mapping)`` call replaces the option bag wholesale
    (it installs the defaults); every later call merges key by key and runs
    any setter registered through :meth:`option_setter`.
    """

    def __init__(self) -> None:
        self._options: dict[str, Any] = {}
        self._options_initialized = False
        self._option_setters: dict[str, Callable[[Any], None]] = {}
        self._handlers: dict[str, list[_Handler]] = {}

    # --- Options ---

    def option(
        self,
        name: str | Mapping[str, Any] | None = None,
        value: Any = _MISSING,
        *,
        overwrite: bool = True,
    ) -> Any:
        """Read or write options.

        ``option()`` returns the whole bag, ``option("a")`` reads one key,
        ``option("a", 1)`` writes one key and ``option({...})`` writes many.
        With ``overwrite=False`` existing keys are left untouched.
        """
        if name is None:
            return self._options

        if isinstance(name, Mapping):
            if not self._options_initialized:
                self._options = copy.copy(dict(name))
                self._options_initialized = True
            else:
                for key, val in name.items():
                    self.option(key, val, overwrite=overwrite)
            return None

        if value is _MISSING:
            return self._options.get(name)

        if overwrite or name not in self._options:
            self._options[name] = value
            setter = self._option_setters.get(name)
            if setter is not None:
                setter(value)
            self._options_initialized = True
        return None

    def get(self, name: str) -> Any:
        return self.option(name)

    def set(self, name: str, value: Any, overwrite: bool = True) -> Component:
        self.option(name, value, overwrite=overwrite)
        return self

    def unset(self, name: str) -> None:
        self._options.pop(name, None)

    def option_setter(self, name: str, fn: Callable[[Any], None]) -> None:
        """Register the single setter run when ``name`` is assigned."""
        self._option_setters[name] = fn

    # --- Events ---

    def attach(
        self, event: str | Mapping[str, _Handler], handler: _Handler | None = None
    ) -> Component:
        """Subscribe ``handler`` to ``event``. Duplicate handlers are ignored."""
        if isinstance(event, Mapping):
            for name, fn in event.items():
                self.attach(name, fn)
            return self

        handlers = self._handlers.setdefault(event, [])
        if handler is None or handler in handlers:
            return self
        handlers.append(handler)
        return self

    def detach(
        self, event: str | Mapping[str, _Handler], handler: _Handler | None = None
    ) -> None:
        """Unsubscribe ``handler``, or every handler of ``event`` when omitted."""
        if isinstance(event, Mapping):
            for name, fn in event.items():
                self.detach(name, fn)
            return

        handlers = self._handlers.get(event)
        if handlers is None:
            return
        if handler is None:
            del self._handlers[event]
            return
        try:
            handlers.remove(handler)
        except ValueError:
            return
        if not handlers:
            del self._handlers[event]

    def detach_all(self, event: str | None = None) -> None:
        if event is None:
            self._handlers = {}
        elif event in self._handlers:
            self._handlers[event] = []

    def has_handlers(self, event: str) -> bool:
        return bool(self._handlers.get(event))

    def fire_event(self, event: str, **data: Any) -> bool:
        """Call every handler of ``event`` in attach order.

        Returns False if any handler called ``stop()`` on the event object.
        Handlers attached or detached while dispatching take effect on the
        next fire.
        """
        handlers = self._handlers.get(event)
        if not handlers:
            return True

        custom_event = ComponentEvent(event, **data)
        canceled = False
        for handler in list(handlers):
            handler(custom_event)
            if custom_event.is_stop():
                canceled = True
        return not canceled
