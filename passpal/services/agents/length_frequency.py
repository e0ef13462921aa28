from collections import Counter

from passpal.models.schemas import AgentReport, AgentType, ReportTable
from passpal.services.agents.base import Agent
from passpal.services.analysis.ranking import percentage


class LengthFrequencyAgent(Agent):
    """Distribution of candidate lengths, always reported in full."""

    name = "LengthFrequencyAgent"
    agent_type = AgentType.LENGTH_FREQUENCY
    description = "Length distribution, full table sorted by length"

    def __init__(self, top_k: int = 10):
        super().__init__(top_k)
        self.lengths: Counter[int] = Counter()
        self.total = 0

    def process_line(self, word: str) -> None:
        self.lengths[len(word)] += 1
        self.total += 1

    def build_report(self) -> AgentReport:
        rows = tuple(
            (length, count, percentage(count, self.total))
            for length, count in sorted(self.lengths.items())
        )
        table = ReportTable(
            title="Length frequency, sorted by length, full table",
            columns=("Length", "Count", "Of total"),
            rows=rows,
        )
        return self.make_report("Length frequency", tables=[table])
