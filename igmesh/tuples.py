"""Small fixed-length numeric vectors used for coordinates and colours."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from numbers import Real
from typing import Union

Scalar = Union[int, float]

# Component indices for coordinates and colours.
X, Y, Z = 0, 1, 2
R, G, B = 0, 1, 2


class Vector:
    """An immutable tuple of numbers with component-wise arithmetic.

    Build it from separate components, ``Vector(1, 2, 3)``, or from one
    iterable, ``Vector([1, 2, 3])``.
    """

    __slots__ = ("_coords",)

    def __init__(self, *args):
        if len(args) == 1 and isinstance(args[0], Iterable):
            values = tuple(args[0])
        else:
            values = tuple(args)
        if not values:
            raise ValueError("a vector needs at least one component")
        for value in values:
            if not isinstance(value, Real):
                raise TypeError(f"vector components must be numbers, got {value!r}")
        self._coords = values

    # -- sequence protocol -------------------------------------------------

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._coords)

    def __getitem__(self, index):
        return self._coords[index]

    @property
    def x(self) -> Scalar:
        return self._coords[X]

    @property
    def y(self) -> Scalar:
        return self._coords[Y]

    @property
    def z(self) -> Scalar:
        return self._coords[Z]

    # -- comparison and display ---------------------------------------------

    def __eq__(self, other) -> bool:
        if isinstance(other, Vector):
            return self._coords == other._coords
        if isinstance(other, tuple):
            return self._coords == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._coords)

    def __repr__(self) -> str:
        return f"Vector{self._coords!r}"

    def __str__(self) -> str:
        return "(" + ",".join(f"{value:g}" for value in self._coords) + ")"

    # -- arithmetic ----------------------------------------------------------

    def _check_same_size(self, other: "Vector") -> None:
        if len(other) != len(self):
            raise ValueError(
                f"vectors differ in size: {len(self)} and {len(other)}"
            )

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        return Vector(a + b for a, b in zip(self, other))

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        return Vector(a - b for a, b in zip(self, other))

    def __neg__(self) -> "Vector":
        return Vector(-a for a in self)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(a * scalar for a in self)

    def __rmul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(scalar * a for a in self)

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(a / scalar for a in self)

    def __or__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    # -- geometry ------------------------------------------------------------

    def dot(self, other: "Vector") -> float:
        """Scalar product, accumulated in floating point."""
        self._check_same_size(other)
        return math.fsum(float(a) * float(b) for a, b in zip(self, other))

    def length_sq(self) -> float:
        """Squared Euclidean length."""
        return self.dot(self)

    def normalized(self) -> "Vector":
        """A copy scaled to unit length; a zero vector cannot be normalized."""
        len_sq = sum(a * a for a in self)
        if not len_sq > 0.0:
            raise ValueError(f"cannot normalize a vector with squared length {len_sq}")
        return self * (1.0 / math.sqrt(float(len_sq)))

    def cross(self, other: "Vector") -> "Vector":
        """Vector product of two three-component vectors."""
        if len(self) != 3 or len(other) != 3:
            raise ValueError("the cross product needs two three-component vectors")
        ax, ay, az = self
        bx, by, bz = other
        return Vector(
            ay * bz - az * by,
            az * bx - ax * bz,
            ax * by - ay * bx,
        )