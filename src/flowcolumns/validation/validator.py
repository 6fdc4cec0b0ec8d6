"""Layout validator: runs all validation rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from flowcolumns.model.columns import ColumnSpec
from flowcolumns.model.diagnostic import Diagnostic
from flowcolumns.model.options import OptionSet
from flowcolumns.validation.rules import ALL_RULES


class ValidationError(Exception):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[ColumnSpec, OptionSet], list[Diagnostic]]


def validate(
    spec: ColumnSpec,
    options: OptionSet | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all validation rules against *spec* under *options*.

    Returns the full list of diagnostics (errors, warnings, info).
    """
    options = options or OptionSet()
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(spec, options))
    return diagnostics


def validate_or_raise(
    spec: ColumnSpec,
    options: OptionSet | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate(spec, options, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
