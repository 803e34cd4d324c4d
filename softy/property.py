"""A value accessed through a getter and an optional setter."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


def _unwrap(value):
    return value.get() if isinstance(value, Property) else value


class Property(Generic[T]):
    """Wraps a getter/setter pair so the value behaves like a plain number.

    Arithmetic and comparisons act on the current value; the in-place
    operators write the result back through the setter.
    """

    __slots__ = ("_getter", "_setter")

    def __init__(self, getter: Callable[[], T], setter: Optional[Callable[[T], Any]] = None) -> None:
        self._getter: Callable[[], T]
        self._setter: Optional[Callable[[T], Any]]
        self.set_property(getter, setter)

    def set_property(self, getter: Callable[[], T], setter: Optional[Callable[[T], Any]] = None) -> None:
        """Replace the getter and setter."""
        if getter is None:
            raise ValueError("a property needs a getter")
        self._getter = getter
        self._setter = setter

    def get(self) -> T:
        return self._getter()

    def set(self, value: T) -> None:
        if self._setter is None:
            raise AttributeError("property is read-only")
        self._setter(_unwrap(value))

    def __add__(self, other):
        return self.get() + _unwrap(other)

    def __radd__(self, other):
        return other + self.get()

    def __sub__(self, other):
        return self.get() - _unwrap(other)

    def __rsub__(self, other):
        return other - self.get()

    def __mul__(self, other):
        return self.get() * _unwrap(other)

    def __rmul__(self, other):
        return other * self.get()

    def __truediv__(self, other):
        return self.get() / _unwrap(other)

    def __rtruediv__(self, other):
        return other / self.get()

    def __mod__(self, other):
        return self.get() % _unwrap(other)

    def __rmod__(self, other):
        return other % self.get()

    def __neg__(self):
        return -self.get()

    def __iadd__(self, other):
        self.set(self.get() + _unwrap(other))
        return self

    def __isub__(self, other):
        self.set(self.get() - _unwrap(other))
        return self

    def __imul__(self, other):
        self.set(self.get() * _unwrap(other))
        return self

    def __itruediv__(self, other):
        self.set(self.get() / _unwrap(other))
        return self

    def __imod__(self, other):
        self.set(self.get() % _unwrap(other))
        return self

    def __eq__(self, other) -> bool:
        return self.get() == _unwrap(other)

    def __lt__(self, other) -> bool:
        return self.get() < _unwrap(other)

    def __le__(self, other) -> bool:
        return self.get() <= _unwrap(other)

    def __gt__(self, other) -> bool:
        return self.get() > _unwrap(other)

    def __ge__(self, other) -> bool:
        return self.get() >= _unwrap(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Property({self.get()!r})"