from collections import Counter
from typing import ClassVar

from passpal.models.schemas import AgentReport, AgentType, ReportTable
from passpal.services.agents.base import Agent
from passpal.services.analysis.ranking import top_k


class CharacterFrequencyAgent(Agent):
    """Counts every character occurrence across the corpus."""

    name = "CharacterFrequencyAgent"
    agent_type = AgentType.CHARACTER_FREQUENCY
    description = "Most common characters and the top 50 character string"

    TOP_STRING_LENGTH: ClassVar[int] = 50
    COLUMNS: ClassVar[tuple[str, ...]] = ("Character", "Count", "Of total")

    def __init__(self, top_k: int = 10):
        super().__init__(top_k)
        self.characters: Counter[str] = Counter()

    @property
    def total(self) -> int:
        return sum(self.characters.values())

    def process_line(self, word: str) -> None:
        self.characters.update(word)

    def top_characters(self) -> str:
        """The most frequent characters, most common first, as one string."""
        return "".join(char for char, _ in top_k(self.characters, self.TOP_STRING_LENGTH))

    def build_report(self) -> AgentReport:
        total = self.total
        table = ReportTable(
            title=f"Character frequency, sorted by count, top {self.top_k}",
            columns=self.COLUMNS,
            rows=self.ranked_rows(self.characters, total),
        )
        return self.make_report(
            "Character frequency",
            summary=[
                f"Total characters: {total}",
                f"Distinct characters: {len(self.characters)}",
                f"Top {self.TOP_STRING_LENGTH} characters: {self.top_characters()}",
            ],
            tables=[table],
        )
