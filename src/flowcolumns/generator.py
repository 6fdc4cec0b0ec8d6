"""Layout rule generator: one style rule per column of a row."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from flowcolumns.geometry import row_boxes
from flowcolumns.model.columns import ColumnSpec
from flowcolumns.model.dimension import Width
from flowcolumns.model.options import OptionSet
from flowcolumns.model.rule import Selector, SelectorList, StyleRule, Stylesheet
from flowcolumns.resolver import OptionResolver
from flowcolumns.selectors import column_selectors, marker_selectors

log = logging.getLogger("flowcolumns")

DEFAULT_SCOPE = ".columns"

# Shared by every column element, whichever column it lands in.
BASE_PROPERTIES: dict[str, str] = {
    "float": "left",
    "position": "relative",
    "box-sizing": "border-box",
}


def base_rule(options: OptionSet) -> StyleRule:
    """The float/position/sizing rule for the generic column markers."""
    return StyleRule(
        selectors=marker_selectors(options),
        properties=dict(BASE_PROPERTIES),
        comment="column base",
    )


def containment_rule(scope: str) -> StyleRule:
    """Clip the negative margins of the legacy strategy to the row."""
    return StyleRule(
        selectors=SelectorList((Selector(scope),)),
        properties={"overflow": "hidden"},
        comment="row containment",
    )


class LayoutRuleGenerator:
    """Emit column rules, tracking options and the one-time base rule.

    Example::

        gen = LayoutRuleGenerator()
        gen.set_options(gutter="30px")
        sheet = gen.emit_columns("25% 50% 25%", scope=".row")
    """

    def __init__(self, resolver: OptionResolver | None = None) -> None:
        self.resolver = resolver or OptionResolver()
        self._base_emitted = False

    @property
    def base_emitted(self) -> bool:
        return self._base_emitted

    # --- options --------------------------------------------------------------

    def set_options(self, **fields: Any) -> OptionSet:
        return self.resolver.set_options(**fields)

    def set_options_once(self, **fields: Any) -> OptionSet:
        return self.resolver.set_options_once(**fields)

    def reset_options(self) -> OptionSet:
        return self.resolver.reset()

    # --- emission -------------------------------------------------------------

    def ensure_base(self, options: OptionSet) -> StyleRule | None:
        """Return the base rule the first time only."""
        if self._base_emitted:
            return None
        self._base_emitted = True
        return base_rule(options)

    def emit_columns(
        self,
        widths: ColumnSpec | str | Iterable[Width | str],
        scope: str = DEFAULT_SCOPE,
        **overrides: Any,
    ) -> Stylesheet:
        """Generate the rules laying out *widths* as columns inside *scope*.

        *overrides* apply to this emission only, as if passed to
        :meth:`set_options_once` just before the call.
        """
        spec = ColumnSpec.of(widths)
        if overrides:
            self.resolver.set_options_once(**overrides)
        options = self.resolver.current()
        total = len(spec)
        try:
            boxes = row_boxes(spec, options.gutter, options.use_width_calculation)
        except ValueError:
            # A failed emission still uses up one-shot options.
            self.resolver.consume()
            raise

        rules: list[StyleRule] = []
        base = self.ensure_base(options)
        if base is not None:
            rules.append(base)
        if not options.use_width_calculation:
            rules.append(containment_rule(scope))

        for index, (width, box) in enumerate(zip(spec, boxes)):
            selectors = column_selectors(total, index + 1, options)
            if not selectors:
                log.warning(
                    "No addressing scheme active: column %d of %d selects no elements",
                    index + 1,
                    total,
                )
                continue
            rules.append(
                StyleRule(
                    selectors=selectors.scoped(scope),
                    properties=box.declarations(),
                    comment=f"column {index + 1} of {total}: {width}",
                )
            )

        log.debug(
            "Emitted %d rule(s) for %s in %s (one_shot=%s)",
            len(rules),
            spec,
            scope,
            options.one_shot,
        )
        self.resolver.consume()
        return Stylesheet(rules=rules)
