"""An optional value whose emptiness can be encoded in the value itself."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class Nothing:
    """Rule that makes and recognises the value standing for "no value".

    By default the stand-in is ``marker`` and a value equal to it is empty.
    Subclasses override :meth:`make` and :meth:`has` for other rules.
    """

    marker: Any = None

    def make(self) -> Any:
        """Return the value stored when the holder is empty."""
        return self.marker

    def has(self, value: Any) -> bool:
        """Tell whether ``value`` stands for "no value"."""
        return value == self.marker


@dataclass(frozen=True)
class FlagNothing(Nothing):
    """Track emptiness with a separate flag; every stored value counts."""


@dataclass(frozen=True)
class FloatNothing(Nothing):
    """Use NaN as the empty value."""

    def make(self) -> float:
        return math.nan

    def has(self, value: Any) -> bool:
        return isinstance(value, float) and math.isnan(value)


@dataclass(frozen=True)
class NoneNothing(Nothing):
    """Use ``None`` as the empty value."""

    def make(self) -> None:
        return None

    def has(self, value: Any) -> bool:
        return value is None


class Maybe:
    """Hold a value or nothing.

    ``Maybe()`` is empty and ``Maybe(value)`` holds ``value``. The
    ``nothing`` rule decides how emptiness is stored: with the default
    :class:`FlagNothing` a flag is kept beside the value, otherwise the
    empty state is a special value that :meth:`Nothing.has` recognises.
    """

    def __init__(self, *args: Any, nothing: Nothing | None = None) -> None:
        if len(args) > 1:
            raise TypeError(f"Maybe takes at most one value, got {len(args)}")
        self._nothing = FlagNothing() if nothing is None else nothing
        self._flagged = isinstance(self._nothing, FlagNothing)
        self._has = False
        self._value: Any = None
        if args:
            self.assign(args[0])
        else:
            self.reset()

    def has_value(self) -> bool:
        """Tell whether a value is held."""
        if self._flagged:
            return self._has
        return not self._nothing.has(self._value)

    def __bool__(self) -> bool:
        return self.has_value()

    def reset(self) -> None:
        """Make the holder empty."""
        if self._flagged:
            self._has = False
            self._value = None
        else:
            self._value = self._nothing.make()

    def get(self) -> Any:
        """Return the stored value.

        With a flag an empty holder raises ``ValueError``; with a value-based
        rule the stored empty value is returned.
        """
        if self._flagged and not self._has:
            raise ValueError("Maybe holds no value")
        return self._value

    def assign(self, value: Any) -> None:
        """Store ``value``; with a value-based rule it may itself mean empty."""
        self._value = value
        if self._flagged:
            self._has = True

    def emplace(self, *args: Any) -> None:
        """Store the arguments as the value; several are stored as a tuple."""
        self.assign(args[0] if len(args) == 1 else tuple(args))

    def and_then(self, func: Callable[[Any], Any], default: Any = None) -> Any:
        """Return ``func(value)`` when a value is held, else ``default``."""
        if self.has_value():
            return func(self._value)
        return default

    def copy(self) -> Maybe:
        """Return an independent holder with the same state."""
        other = Maybe(nothing=self._nothing)
        other._value = self._value
        other._has = self._has
        return other

    def __repr__(self) -> str:
        if self.has_value():
            return f"Maybe({self._value!r})"
        return "Maybe()"