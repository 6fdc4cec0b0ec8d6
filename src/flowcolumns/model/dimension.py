"""Dimension model: exact CSS lengths and the two column width kinds."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

Number = int | float | Fraction

# Rendered lengths keep at most this many decimal places.
PRECISION = 4


def to_fraction(value: Number | str) -> Fraction:
    """Convert *value* to an exact Fraction.

    Floats go through their shortest repr so ``0.1`` becomes ``1/10`` rather
    than its binary approximation.
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, float):
        return Fraction(repr(value))
    return Fraction(value)


def format_number(value: Fraction) -> str:
    """Render *value* with at most four decimals and no trailing zeros."""
    rounded = round(value, PRECISION)
    if rounded.denominator == 1:
        return str(rounded.numerator)
    return f"{float(rounded):.{PRECISION}f}".rstrip("0").rstrip(".")


@dataclass(frozen=True, eq=False)
class Dimension:
    """A linear combination of CSS unit terms, e.g. ``50% - 160px``.

    A single term renders as a plain literal (``320px``); several terms need
    the width-calculation primitive and render as ``calc(...)``.
    Coefficients are exact, so gutter arithmetic never drifts.
    """

    terms: tuple[tuple[str, Fraction], ...] = ()

    def __post_init__(self) -> None:
        merged: dict[str, Fraction] = {}
        for unit, coefficient in self.terms:
            merged[unit] = merged.get(unit, Fraction(0)) + to_fraction(coefficient)
        object.__setattr__(
            self, "terms", tuple((u, c) for u, c in merged.items() if c != 0)
        )

    @classmethod
    def of(cls, value: Number, unit: str = "px") -> Dimension:
        return cls(((unit, to_fraction(value)),))

    @classmethod
    def zero(cls) -> Dimension:
        return cls()

    # --- inspection -----------------------------------------------------------

    @property
    def units(self) -> tuple[str, ...]:
        return tuple(unit for unit, _ in self.terms)

    @property
    def is_zero(self) -> bool:
        return not self.terms

    @property
    def is_single_unit(self) -> bool:
        return len(self.terms) <= 1

    @property
    def is_negative(self) -> bool:
        """True if any term is negative."""
        return any(c < 0 for _, c in self.terms)

    def coefficient(self, unit: str) -> Fraction:
        return dict(self.terms).get(unit, Fraction(0))

    # --- arithmetic -----------------------------------------------------------

    def __add__(self, other: Dimension) -> Dimension:
        if not isinstance(other, Dimension):
            return NotImplemented
        return Dimension(self.terms + other.terms)

    def __sub__(self, other: Dimension) -> Dimension:
        if not isinstance(other, Dimension):
            return NotImplemented
        return self + (-other)

    def __neg__(self) -> Dimension:
        return Dimension(tuple((u, -c) for u, c in self.terms))

    def __mul__(self, factor: Number) -> Dimension:
        if isinstance(factor, Dimension):
            return NotImplemented
        scale = to_fraction(factor)
        return Dimension(tuple((u, c * scale) for u, c in self.terms))

    __rmul__ = __mul__

    def __truediv__(self, divisor: Number) -> Dimension:
        return self * (1 / to_fraction(divisor))

    def __abs__(self) -> Dimension:
        if all(c >= 0 for _, c in self.terms):
            return self
        if all(c <= 0 for _, c in self.terms):
            return -self
        raise ValueError(f"Cannot take the absolute value of mixed-sign {self}")

    def __bool__(self) -> bool:
        return not self.is_zero

    # --- equality -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (int, float, Fraction)) and other == 0:
            return self.is_zero
        if not isinstance(other, Dimension):
            return NotImplemented
        return dict(self.terms) == dict(other.terms)

    def __hash__(self) -> int:
        return hash(frozenset(self.terms))

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        # Terms too small to show at PRECISION are left out of the output.
        terms = [(u, c) for u, c in self.terms if round(c, PRECISION) != 0]
        if not terms:
            return "0"
        first_unit, first = terms[0]
        text = f"{format_number(first)}{first_unit}"
        if len(terms) == 1:
            return text
        for unit, coefficient in terms[1:]:
            sign = "-" if coefficient < 0 else "+"
            text += f" {sign} {format_number(abs(coefficient))}{unit}"
        return f"calc({text})"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Dimension({self.render()!r})"


@dataclass(frozen=True)
class Percentage:
    """A fluid column width expressed as a share of the row."""

    value: Fraction

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_fraction(self.value))
        if self.value < 0:
            raise ValueError(f"Percentage width must not be negative, got {self}")

    @property
    def is_fixed(self) -> bool:
        return False

    def as_dimension(self) -> Dimension:
        return Dimension.of(self.value, "%")

    def __str__(self) -> str:
        return f"{format_number(self.value)}%"


@dataclass(frozen=True)
class FixedLength:
    """A column width given in an absolute or font-relative unit."""

    value: Fraction
    unit: str = "px"

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_fraction(self.value))
        if self.unit == "%":
            raise ValueError("FixedLength cannot use '%'; use Percentage instead")
        if not self.unit:
            raise ValueError("FixedLength requires a unit")
        if self.value < 0:
            raise ValueError(f"Fixed width must not be negative, got {self}")

    @property
    def is_fixed(self) -> bool:
        return True

    def as_dimension(self) -> Dimension:
        return Dimension.of(self.value, self.unit)

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit}"


Width = Percentage | FixedLength
