from collections import Counter
from typing import ClassVar

from passpal.models.schemas import AgentReport, AgentType, ReportTable
from passpal.services.agents.base import Agent
from passpal.services.analysis.charsets import LOWER, NUMERIC, SYMBOLIC, UPPER, classify_char
from passpal.services.analysis.ranking import percentage


class CharsetPositionAgent(Agent):
    """
    Class distribution of the first three and last three characters.

    Only words of at least MIN_LENGTH characters are considered, so the
    leading and trailing windows never overlap. Positions are signed: 0 is
    the first character and -1 the last. Each report cell is the share of
    one class among all classified characters seen at that position.
    """

    name = "CharsetPositionAgent"
    agent_type = AgentType.CHARSET_POSITION
    description = "Character classes at the first and last three positions (len>=6)"

    MIN_LENGTH: ClassVar[int] = 6
    POSITIONS: ClassVar[tuple[int, ...]] = (0, 1, 2, -3, -2, -1)

    ROWS: ClassVar[tuple[tuple[str, str], ...]] = (
        (LOWER, "lower"),
        (UPPER, "upper"),
        (NUMERIC, "digits"),
        (SYMBOLIC, "symbols"),
    )
    COLUMNS: ClassVar[tuple[str, ...]] = (
        "Charset\\Index",
        "0 (first char)",
        "1",
        "2",
        "-3",
        "-2",
        "-1 (last char)",
    )

    def __init__(self, top_k: int = 10):
        super().__init__(top_k)
        self.results: Counter[tuple[int, str]] = Counter()

    def process_line(self, word: str) -> None:
        if len(word) < self.MIN_LENGTH:
            return
        for position in self.POSITIONS:
            charset = classify_char(word[position])
            if charset is not None:
                self.results[(position, charset)] += 1

    def position_total(self, position: int) -> int:
        return sum(self.results[(position, charset)] for charset, _ in self.ROWS)

    def build_report(self) -> AgentReport:
        totals = {position: self.position_total(position) for position in self.POSITIONS}
        rows = tuple(
            (label,)
            + tuple(
                percentage(self.results[(position, charset)], totals[position])
                for position in self.POSITIONS
            )
            for charset, label in self.ROWS
        )
        table = ReportTable(
            title=(
                "Charset distribution of characters in beginning and end "
                f"of words (len>={self.MIN_LENGTH})"
            ),
            columns=self.COLUMNS,
            rows=rows,
            percent_columns=self.COLUMNS[1:],
        )
        return self.make_report("Charset position", tables=[table])
