from passpal.models.schemas import AgentReport, AgentTiming, Cell, ReportTable


class TextRenderer:
    """
    Renders agent reports as plain-text tables.

    Tables are drawn with ASCII borders:

        +--------+-------+-----------+
        | Word   | Count | Of total  |
        +--------+-------+-----------+
        | abc123 |     2 | 66.6667 % |
        +--------+-------+-----------+
    """

    def __init__(self, precision: int = 4):
        self.precision = precision

    def format_cell(self, value: Cell, percent: bool = False) -> str:
        """Format one cell; floats are fixed-point unless too small to show."""
        if isinstance(value, float):
            if value == 0 or abs(value) >= 10 ** -self.precision:
                text = f"{value:.{self.precision}f}"
            else:
                text = f"{value:.{self.precision}e}"
            return f"{text} %" if percent else text
        return str(value)

    def render_table(self, table: ReportTable) -> str:
        percent = [column in table.percent_columns for column in table.columns]
        body = [
            [self.format_cell(cell, percent[i]) for i, cell in enumerate(row)]
            for row in table.rows
        ]
        header = [str(column) for column in table.columns]
        widths = [
            max(len(cells[i]) for cells in [header, *body])
            for i in range(len(header))
        ]

        border = "+" + "+".join("-" * (width + 2) for width in widths) + "+"

        def line(cells: list[str], numeric_right: bool) -> str:
            padded = []
            for i, cell in enumerate(cells):
                # first column is the label, the rest are numbers
                if numeric_right and i > 0:
                    padded.append(cell.rjust(widths[i]))
                else:
                    padded.append(cell.ljust(widths[i]))
            return "| " + " | ".join(padded) + " |"

        lines = [table.title, border, line(header, False), border]
        lines.extend(line(cells, True) for cells in body)
        lines.append(border)
        return "\n".join(lines)

    def render_report(self, report: AgentReport) -> str:
        parts = []
        if report.error:
            parts.append(f"{report.title}: FAILED - {report.error}")
        if report.summary:
            parts.append("\n".join(report.summary))
        parts.extend(self.render_table(table) for table in report.tables)
        return "\n\n".join(parts)

    def render(
        self,
        reports: list[AgentReport],
        header: str | None = None,
        timings: list[AgentTiming] | None = None,
    ) -> str:
        """
        Render a whole run.

        Args:
            reports: Agent reports in catalog order
            header: Optional banner placed before the first report
            timings: Profiling data; adds a profiling section when given

        Returns:
            Non-empty reports separated by a blank line
        """
        sections = []
        if header:
            sections.append(header)
        sections.extend(self.render_report(report) for report in reports if not report.is_empty)
        if timings:
            sections.append(self.render_timings(timings))
        return "\n\n".join(sections) + "\n"

    def render_timings(self, timings: list[AgentTiming]) -> str:
        lines = ["Inaccurate profiling"]
        lines.extend(
            f"{timing.agent} - Analyzing: {timing.analyze_seconds:.4f}s "
            f"Reporting: {timing.report_seconds:.4f}s"
            for timing in timings
        )
        return "\n".join(lines)
