from collections import Counter
from typing import ClassVar

from passpal.models.schemas import AgentReport, AgentType, ReportTable
from passpal.services.agents.base import Agent
from passpal.services.analysis.charsets import CHARSETS, CharsetCatalog
from passpal.services.analysis.ranking import density, percentage


class CharsetFrequencyAgent(Agent):
    """
    Counts which character classes each candidate fits in.

    Every class predicate is evaluated independently, so a word made only of
    lowercase letters counts towards "lower" and towards every combined
    class that includes lower. Both tables list all 15 classes.
    """

    name = "CharsetFrequencyAgent"
    agent_type = AgentType.CHARSET_FREQUENCY
    description = "Character class frequency, by count and by count/keyspace"

    COLUMNS: ClassVar[tuple[str, ...]] = ("Charset", "Count", "Of total", "Count/keyspace")

    def __init__(self, top_k: int = 10, catalog: CharsetCatalog = CHARSETS):
        super().__init__(top_k)
        self.catalog = catalog
        self.results: Counter[str] = Counter()
        self.total = 0

    def process_line(self, word: str) -> None:
        for charset in self.catalog.matching(word):
            self.results[charset.name] += 1
        self.total += 1

    def build_report(self) -> AgentReport:
        rows = [
            (
                charset.name,
                self.results[charset.name],
                percentage(self.results[charset.name], self.total),
                density(self.results[charset.name], charset.keyspace),
            )
            for charset in self.catalog
        ]
        # sorted() is stable, ties keep catalog order
        by_count = sorted(rows, key=lambda row: row[1], reverse=True)
        by_density = sorted(rows, key=lambda row: row[3], reverse=True)

        return self.make_report(
            "Charset frequency",
            tables=[
                ReportTable(
                    title="Charset frequency, sorted by count, full table",
                    columns=self.COLUMNS,
                    rows=tuple(by_count),
                ),
                ReportTable(
                    title="Charset frequency, sorted by count/keyspace, full table",
                    columns=self.COLUMNS,
                    rows=tuple(by_density),
                ),
            ],
        )
