"""Tests for the plain-text renderer."""

import pytest

from passpal.models.schemas import AgentReport, AgentTiming, ReportTable
from passpal.services.rendering.text import TextRenderer


class TestTextRenderer:
    """Test table and report rendering."""

    @pytest.fixture
    def renderer(self):
        return TextRenderer()

    @pytest.fixture
    def table(self):
        return ReportTable(
            title="Word frequency, sorted by count, top 2",
            columns=("Word", "Count", "Of total"),
            rows=(("abc123", 2, 66.6667), ("ABCD", 1, 33.3333)),
        )

    def test_table_layout(self, renderer, table):
        assert renderer.render_table(table).splitlines() == [
            "Word frequency, sorted by count, top 2",
            "+--------+-------+-----------+",
            "| Word   | Count | Of total  |",
            "+--------+-------+-----------+",
            "| abc123 |     2 | 66.6667 % |",
            "| ABCD   |     1 | 33.3333 % |",
            "+--------+-------+-----------+",
        ]

    def test_empty_table(self, renderer):
        table = ReportTable(title="Empty", columns=("Symbol", "Count", "Of total"))
        lines = renderer.render_table(table).splitlines()
        assert lines[2] == "| Symbol | Count | Of total |"
        assert len(lines) == 5

    def test_tiny_floats_use_exponent(self, renderer):
        assert renderer.format_cell(1 / 308915776) == "3.2371e-09"
        assert renderer.format_cell(0.0) == "0.0000"
        assert renderer.format_cell(0.1) == "0.1000"
        assert renderer.format_cell(25.0, percent=True) == "25.0000 %"

    def test_reports_separated_by_blank_line(self, renderer, table):
        reports = [
            AgentReport(agent="A", title="A", summary=("Total words: 3",), tables=(table,)),
            AgentReport(agent="Silent", title="Silent"),
            AgentReport(agent="B", title="B", summary=("only summary",)),
        ]
        output = renderer.render(reports, header="passpal report")

        sections = output.rstrip("\n").split("\n\n")
        assert sections[0] == "passpal report"
        assert sections[1] == "Total words: 3"
        assert sections[2].startswith("Word frequency")
        assert sections[3] == "only summary"
        assert "Silent" not in output

    def test_error_marker_rendered(self, renderer):
        report = AgentReport(agent="X", title="XAgent", error="Agent 'XAgent' failed while analyzing: boom")
        output = renderer.render([report])
        assert "XAgent: FAILED - Agent 'XAgent' failed while analyzing: boom" in output

    def test_timings(self, renderer):
        output = renderer.render(
            [],
            timings=[AgentTiming(agent="WordFrequencyAgent", analyze_seconds=1.5, report_seconds=0.25)],
        )
        assert "Inaccurate profiling" in output
        assert "WordFrequencyAgent - Analyzing: 1.5000s Reporting: 0.2500s" in output
