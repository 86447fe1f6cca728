import pytest

from smallworld.models.chain import ChainGroup, ChainLink
from smallworld.models.resolution import LookupFailure, LookupFailureKind
from smallworld.services.chain_formatter import format_chains_html, format_chains_text
from smallworld.services.deck_bridges import BridgeReport


@pytest.fixture
def report(make_card) -> BridgeReport:
    return BridgeReport(
        cards={
            "A": make_card("A", image_url="https://images.example/a.jpg"),
            "B & Co": make_card("B & Co", image_url="https://images.example/b.jpg"),
            "C": make_card("C"),
            "D": make_card("D"),
        },
        groups=[
            ChainGroup(reveal="A", links=(ChainLink(reveal="B & Co", targets=("C",)),)),
            ChainGroup(reveal="D"),
        ],
    )


class TestFormatChainsText:
    def test_outline(self, report: BridgeReport) -> None:
        assert format_chains_text(report) == "\n".join(
            [
                "Reveal from hand: A",
                "  Reveal from deck: B & Co",
                "    Add: C",
                "Reveal from hand: D",
                "  (no bridges)",
            ]
        )

    def test_lists_failures(self, report: BridgeReport) -> None:
        report.failures.append(
            LookupFailure("404", LookupFailureKind.NOT_FOUND, "No card with id 404")
        )

        output = format_chains_text(report)

        assert output.endswith("Could not resolve:\n- 404: No card with id 404")

    def test_no_monsters(self) -> None:
        assert format_chains_text(BridgeReport()) == "No monsters found in the main deck."


class TestFormatChainsHtml:
    def test_nested_lists(self, report: BridgeReport) -> None:
        html = format_chains_html(report)

        assert html == (
            '<a href="https://images.example/a.jpg">A</a><ul>'
            '<li><a href="https://images.example/b.jpg">B &amp; Co</a><ul>'
            "<li>C</li>"
            "</ul></li>"
            "</ul>"
            "D<ul></ul>"
        )

    def test_failures_are_listed(self, report: BridgeReport) -> None:
        report.failures.append(LookupFailure("<9>", LookupFailureKind.HTTP_ERROR, "boom"))

        assert '<div class="error">Could not resolve: &lt;9&gt;</div>' in format_chains_html(report)

    def test_empty_report(self) -> None:
        assert format_chains_html(BridgeReport()) == ""
