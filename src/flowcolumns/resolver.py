"""Option resolution: persistent defaults plus a pending, possibly one-shot, set.

The pending value is either ``Persistent`` (it is the default) or ``OneShot``
(it applies to the next emission only). ``set_options`` updates the default
and the pending value together; ``set_options_once`` touches only the pending
value. The asymmetry is deliberate and kept for compatibility.

The resolver is not synchronised. Callers sharing one across threads must
serialise calls that mutate it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from flowcolumns.model.options import OptionSet, normalize_options


@dataclass(frozen=True)
class Persistent:
    """Pending options that are also the persistent default."""

    options: OptionSet


@dataclass(frozen=True)
class OneShot:
    """Pending options consumed by exactly one emission."""

    options: OptionSet


Pending = Persistent | OneShot


class OptionResolver:
    """Holds the persistent default OptionSet and the pending one."""

    def __init__(self, defaults: OptionSet | None = None) -> None:
        self._factory = defaults or OptionSet()
        self._default = self._factory
        self._pending: Pending = Persistent(self._default)

    @property
    def default(self) -> OptionSet:
        return self._default

    @property
    def pending(self) -> Pending:
        return self._pending

    def set_options(self, **fields: Any) -> OptionSet:
        """Update the persistent default and make it pending.

        Passing ``one_shot=True`` behaves like :meth:`set_options_once`.
        """
        if normalize_options(fields).get("one_shot"):
            return self.set_options_once(**fields)
        self._default = self._default.merged(**fields)
        self._pending = Persistent(self._default)
        return self._default

    def set_options_once(self, **fields: Any) -> OptionSet:
        """Override the pending options for the next emission only."""
        options = self._pending.options.merged(**fields).merged(one_shot=True)
        self._pending = OneShot(options)
        return options

    def current(self) -> OptionSet:
        """The options the next emission will use, without consuming them."""
        return self._pending.options

    def consume(self) -> OptionSet:
        """Return the pending options and settle the state after an emission."""
        pending = self._pending
        if isinstance(pending, OneShot):
            self._pending = Persistent(self._default)
        else:
            self._default = pending.options
        return pending.options

    def reset(self) -> OptionSet:
        """Restore the factory defaults and drop any pending override."""
        self._default = self._factory
        self._pending = Persistent(self._default)
        return self._default

    def __repr__(self) -> str:
        kind = type(self._pending).__name__
        return f"OptionResolver(pending={kind}, default={self._default!r})"
