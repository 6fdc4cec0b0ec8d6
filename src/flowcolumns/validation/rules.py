"""Validation rules for column layouts.

Each rule is a function taking a ColumnSpec and an OptionSet and returning a
list of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from flowcolumns.geometry import fixed_widths
from flowcolumns.model.columns import ColumnSpec
from flowcolumns.model.diagnostic import Diagnostic, Severity
from flowcolumns.model.dimension import Dimension, format_number
from flowcolumns.model.options import OptionSet

# Chains longer than this many siblings bloat the stylesheet noticeably.
LONG_CHAIN_THRESHOLD = 100


def check_percentage_total(spec: ColumnSpec, options: OptionSet) -> list[Diagnostic]:
    """Fluid columns should fill the row exactly."""
    percentages = spec.percentages
    if not percentages:
        return []
    share = sum(p.value for p in percentages)
    total = format_number(share)
    if share > 100:
        return [
            Diagnostic(
                rule="check_percentage_total",
                severity=Severity.WARNING,
                message=f"Percentage widths add up to {total}%, more than the row.",
                fix="Reduce the percentage widths so they total 100%.",
            )
        ]
    if share < 100:
        return [
            Diagnostic(
                rule="check_percentage_total",
                severity=Severity.WARNING,
                message=f"Percentage widths add up to {total}%; the row will not be filled.",
                fix="Make the percentage widths total 100%.",
            )
        ]
    return []


def check_addressing_scheme(spec: ColumnSpec, options: OptionSet) -> list[Diagnostic]:
    """At least one addressing scheme must be on for columns to be selected."""
    if options.any_scheme:
        return []
    return [
        Diagnostic(
            rule="check_addressing_scheme",
            severity=Severity.WARNING,
            message="No addressing scheme is active; no column rules will be emitted.",
            fix="Enable the structural, attribute or sibling-chain scheme.",
        )
    ]


def check_fallback_depth(spec: ColumnSpec, options: OptionSet) -> list[Diagnostic]:
    """The sibling-chain fallback needs a useful, bounded depth."""
    if not options.use_sibling_chain_fallback:
        return []
    depth = options.sibling_chain_max_depth
    if depth == 0:
        return [
            Diagnostic(
                rule="check_fallback_depth",
                severity=Severity.WARNING,
                message="Sibling-chain fallback is on but its depth is 0.",
                fix="Set sibling_chain_max_depth to the most rows you expect.",
            )
        ]
    # The last column of the deepest row has the longest chain.
    longest = depth * len(spec)
    if longest > LONG_CHAIN_THRESHOLD:
        return [
            Diagnostic(
                rule="check_fallback_depth",
                severity=Severity.INFO,
                message=(
                    f"Longest sibling chain spans {longest} elements; "
                    "the generated selectors will be large."
                ),
                fix="Lower sibling_chain_max_depth if fewer rows are needed.",
            )
        ]
    return []


def check_legacy_units(spec: ColumnSpec, options: OptionSet) -> list[Diagnostic]:
    """Without calc() the gutter and the fixed widths must share one unit.

    Percentage columns fold the fixed widths into their padding and negative
    margin, next to the gutter share, so all of them are added together.
    """
    if options.use_width_calculation:
        return []
    fixed = fixed_widths(spec) if spec.percentages else Dimension.zero()
    if (fixed + options.gutter).is_single_unit:
        return []
    if not fixed.is_single_unit:
        message = (
            f"Fixed widths mix units ({', '.join(fixed.units)}); "
            "their sum cannot be expressed without calc()."
        )
    elif not options.gutter.is_single_unit:
        message = f"Gutter {options.gutter} mixes units; paddings need calc()."
    else:
        message = (
            f"Gutter unit ({', '.join(options.gutter.units)}) differs from the "
            f"fixed widths ({', '.join(fixed.units)}); paddings need calc()."
        )
    return [
        Diagnostic(
            rule="check_legacy_units",
            severity=Severity.ERROR,
            message=message,
            fix="Use one unit for the gutter and fixed widths or enable width calculation.",
        )
    ]


def check_gutter_unit(spec: ColumnSpec, options: OptionSet) -> list[Diagnostic]:
    """Gutters are expected in a single unit."""
    if options.gutter.is_single_unit:
        return []
    return [
        Diagnostic(
            rule="check_gutter_unit",
            severity=Severity.WARNING,
            message=f"Gutter {options.gutter} mixes units; paddings will need calc().",
            fix="Give the gutter in a single unit.",
        )
    ]


def check_fixed_overflow(spec: ColumnSpec, options: OptionSet) -> list[Diagnostic]:
    """A fluid column with a share of zero cannot give up room."""
    diagnostics: list[Diagnostic] = []
    if not spec.fixed:
        return diagnostics
    for index, width in enumerate(spec, start=1):
        if not width.is_fixed and width.value == 0:
            diagnostics.append(
                Diagnostic(
                    rule="check_fixed_overflow",
                    severity=Severity.WARNING,
                    message=f"Column {index} is 0% wide next to fixed columns.",
                    column=index,
                    fix="Give the column a non-zero percentage.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_percentage_total,
    check_addressing_scheme,
    check_fallback_depth,
    check_legacy_units,
    check_gutter_unit,
    check_fixed_overflow,
]
