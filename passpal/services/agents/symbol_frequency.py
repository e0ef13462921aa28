from collections import Counter

from passpal.models.schemas import AgentReport, AgentType, ReportTable
from passpal.services.agents.base import Agent
from passpal.services.analysis.charsets import is_symbol


class SymbolFrequencyAgent(Agent):
    """Counts occurrences of symbol characters (ASCII punctuation and space)."""

    name = "SymbolFrequencyAgent"
    agent_type = AgentType.SYMBOL_FREQUENCY
    description = "Most common symbols"

    def __init__(self, top_k: int = 10):
        super().__init__(top_k)
        self.symbols: Counter[str] = Counter()

    @property
    def total(self) -> int:
        return sum(self.symbols.values())

    def process_line(self, word: str) -> None:
        self.symbols.update(char for char in word if is_symbol(char))

    def build_report(self) -> AgentReport:
        table = ReportTable(
            title=f"Symbol frequency, sorted by count, top {self.top_k}",
            columns=("Symbol", "Count", "Of total"),
            rows=self.ranked_rows(self.symbols, self.total),
        )
        return self.make_report("Symbol frequency", tables=[table])
