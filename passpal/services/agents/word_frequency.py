import re
from collections import Counter
from typing import ClassVar

from passpal.models.schemas import AgentReport, AgentType, ReportTable
from passpal.services.agents.base import Agent
from passpal.services.analysis.ranking import percentage


class WordFrequencyAgent(Agent):
    """Counts how often each exact candidate occurs."""

    name = "WordFrequencyAgent"
    agent_type = AgentType.WORD_FREQUENCY
    description = "Most common words, with the share of unique words"

    COLUMNS: ClassVar[tuple[str, ...]] = ("Word", "Count", "Of total")

    def __init__(self, top_k: int = 10):
        super().__init__(top_k)
        self.words: Counter[str] = Counter()
        self.total = 0

    def process_line(self, word: str) -> None:
        self.words[word] += 1
        self.total += 1

    def build_report(self) -> AgentReport:
        unique = len(self.words)
        table = ReportTable(
            title=f"Word frequency, sorted by count, top {self.top_k}",
            columns=self.COLUMNS,
            rows=self.ranked_rows(self.words, self.total),
        )
        return self.make_report(
            "Word frequency",
            summary=[
                f"Total words: {self.total}",
                f"Unique words: {unique} ({percentage(unique, self.total):.2f} %)",
            ],
            tables=[table],
        )


class BaseWordFrequencyAgent(Agent):
    """
    Counts base words: candidates with leading and trailing non-letters removed.

    "Password123!" and "!!password" both fold into "password". Base words
    shorter than MIN_LENGTH are skipped but the line still counts towards
    the total the percentages are taken of.
    """

    name = "BaseWordFrequencyAgent"
    agent_type = AgentType.BASE_WORD_FREQUENCY
    description = "Most common base words (letters only, length >= 3)"

    MIN_LENGTH: ClassVar[int] = 3
    COLUMNS: ClassVar[tuple[str, ...]] = ("Word", "Count", "Of total")

    _leading = re.compile(r"^[^a-zA-Z]+")
    _trailing = re.compile(r"[^a-zA-Z]+$")

    def __init__(self, top_k: int = 10):
        super().__init__(top_k)
        self.words: Counter[str] = Counter()
        self.total = 0

    @classmethod
    def base_word(cls, word: str) -> str:
        return cls._trailing.sub("", cls._leading.sub("", word))

    def process_line(self, word: str) -> None:
        self.total += 1
        base = self.base_word(word)
        if len(base) >= self.MIN_LENGTH:
            self.words[base] += 1

    def build_report(self) -> AgentReport:
        table = ReportTable(
            title=(
                f"Base word (len>={self.MIN_LENGTH}) frequency, "
                f"sorted by count, top {self.top_k}"
            ),
            columns=self.COLUMNS,
            rows=self.ranked_rows(self.words, self.total),
        )
        return self.make_report("Base word frequency", tables=[table])
