"""Serialise a Stylesheet into literal CSS text."""

from __future__ import annotations

from flowcolumns.model.rule import StyleRule, Stylesheet


def render_rule(rule: StyleRule, indent: str = "  ") -> str:
    """Render one rule, one selector alternative per line."""
    lines: list[str] = []
    if rule.comment:
        lines.append(f"/* {rule.comment} */")
    lines.append(rule.selectors.join(",\n") + " {")
    for prop, value in rule.properties.items():
        lines.append(f"{indent}{prop}: {value};")
    lines.append("}")
    return "\n".join(lines)


def render_css(stylesheet: Stylesheet, indent: str = "  ") -> str:
    """Render every rule of *stylesheet*, separated by blank lines."""
    blocks = [render_rule(rule, indent) for rule in stylesheet if rule.selectors]
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"
