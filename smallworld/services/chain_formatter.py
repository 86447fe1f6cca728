"""
Chain formatter.

Renders a BridgeReport for people: plain text for the terminal, nested
lists of artwork links for the browser.
"""

from html import escape

from smallworld.services.deck_bridges import BridgeReport


def format_chains_text(report: BridgeReport) -> str:
    """Format chains as an indented outline."""
    if not report.cards:
        lines = ["No monsters found in the main deck."]
    else:
        lines = []
        for group in report.groups:
            lines.append(f"Reveal from hand: {group.reveal}")
            if group.is_empty:
                lines.append("  (no bridges)")
            for link in group.links:
                lines.append(f"  Reveal from deck: {link.reveal}")
                for target in link.targets:
                    lines.append(f"    Add: {target}")

    if report.failures:
        lines.append("")
        lines.append("Could not resolve:")
        for failure in report.failures:
            lines.append(f"- {failure.identifier}: {failure.message}")

    return "\n".join(lines)


def _card_link(report: BridgeReport, name: str) -> str:
    card = report.cards.get(name)
    label = escape(name)
    if card is None or not card.image_url:
        return label
    return f'<a href="{escape(card.image_url, quote=True)}">{label}</a>'


def format_chains_html(report: BridgeReport) -> str:
    """Format chains as nested HTML lists, one per hand reveal."""
    parts: list[str] = []

    for group in report.groups:
        parts.append(_card_link(report, group.reveal))
        parts.append("<ul>")
        for link in group.links:
            parts.append(f"<li>{_card_link(report, link.reveal)}<ul>")
            for target in link.targets:
                parts.append(f"<li>{_card_link(report, target)}</li>")
            parts.append("</ul></li>")
        parts.append("</ul>")

    if report.failures:
        failed = ", ".join(escape(failure.identifier) for failure in report.failures)
        parts.append(f'<div class="error">Could not resolve: {failed}</div>')

    return "".join(parts)
