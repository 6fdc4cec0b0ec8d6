"""OptionSet: the flags and parameters that shape generated column rules."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields, replace
from fractions import Fraction
from typing import Any, Mapping

from flowcolumns.model.dimension import Dimension

_CAMEL_BOUNDARY_RE = re.compile(r"(?<!^)(?=[A-Z])")

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off"})


@dataclass(frozen=True)
class OptionSet:
    """Configuration for selector synthesis and box geometry.

    Attributes:
        use_structural_selector: Emit ``:nth-of-type(Nn+K)`` alternatives.
        use_attribute_selector: Emit ``[data-column~="N-K"]`` alternatives.
        use_sibling_chain_fallback: Emit ``:first-child + X`` chains.
        sibling_chain_max_depth: Chained alternatives emitted per column.
        class_name: Marker class carried by every column element.
        attribute_name: Marker attribute naming an element's column.
        gutter: Spacing between adjacent columns.
        use_width_calculation: Target supports ``calc()``; otherwise the
            legacy negative-margin strategy is used.
        one_shot: Applies to one emission only.
    """

    use_structural_selector: bool = True
    use_attribute_selector: bool = False
    use_sibling_chain_fallback: bool = False
    sibling_chain_max_depth: int = 20
    class_name: str = "column"
    attribute_name: str = "data-column"
    gutter: Dimension = field(default_factory=Dimension.zero)
    use_width_calculation: bool = True
    one_shot: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.gutter, Dimension):
            object.__setattr__(self, "gutter", coerce_gutter(self.gutter))
        if self.gutter.is_negative:
            raise ValueError(f"gutter must not be negative, got {self.gutter}")
        if self.sibling_chain_max_depth < 0:
            raise ValueError(
                "sibling_chain_max_depth must be >= 0, "
                f"got {self.sibling_chain_max_depth}"
            )
        if not self.class_name:
            raise ValueError("class_name must be a non-empty string")
        if not self.attribute_name:
            raise ValueError("attribute_name must be a non-empty string")

    @property
    def any_scheme(self) -> bool:
        """True if at least one addressing scheme is switched on."""
        return (
            self.use_structural_selector
            or self.use_attribute_selector
            or self.use_sibling_chain_fallback
        )

    def merged(self, **overrides: Any) -> OptionSet:
        """Return a copy with *overrides* (any accepted spelling) applied."""
        if not overrides:
            return self
        return replace(self, **normalize_options(overrides))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> OptionSet:
        """Build an OptionSet from a mapping such as a parsed JSON file."""
        return cls(**normalize_options(mapping))


# ---------------------------------------------------------------------------
# Name normalization and value coercion
# ---------------------------------------------------------------------------

OPTION_FIELDS: dict[str, Any] = {f.name: f.type for f in fields(OptionSet)}


def option_key(name: str) -> str:
    """Normalize camelCase or kebab-case option names to the field name."""
    key = _CAMEL_BOUNDARY_RE.sub("_", name).replace("-", "_").lower()
    if key not in OPTION_FIELDS:
        raise KeyError(f"Unknown option: {name!r}")
    return key


def coerce_gutter(value: object) -> Dimension:
    """Accept a Dimension, a CSS length string, or a number of pixels."""
    if isinstance(value, Dimension):
        return value
    if isinstance(value, str):
        from flowcolumns.parser import parse_dimension

        return parse_dimension(value)
    if isinstance(value, (int, float, Fraction)) and not isinstance(value, bool):
        return Dimension.of(value, "px")
    raise TypeError(f"Cannot use {value!r} as a gutter")


def _coerce(key: str, value: object) -> object:
    annotation = OPTION_FIELDS[key]
    if annotation == "bool":
        if isinstance(value, str):
            text = value.strip().lower()
            if text in _TRUE_STRINGS:
                return True
            if text in _FALSE_STRINGS:
                return False
            raise ValueError(f"Option {key} expects true or false, got {value!r}")
        return bool(value)
    if annotation == "int":
        return int(value)  # type: ignore[arg-type]
    if annotation == "str":
        return str(value)
    if key == "gutter":
        return coerce_gutter(value)
    return value


def normalize_options(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Map accepted option spellings to field names and coerce their values."""
    normalized: dict[str, Any] = {}
    for name, value in mapping.items():
        key = option_key(name)
        normalized[key] = _coerce(key, value)
    return normalized
