from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import ClassVar

from passpal.models.schemas import AgentReport, AgentType, ReportRow, ReportTable
from passpal.services.analysis.ranking import percentage, top_k


class Agent(ABC):
    """
    Abstract base class for all analysis agents.

    An agent folds a stream of words into its own accumulator and turns that
    accumulator into a report once the stream ends.

    Each agent implementation must provide:
    - process_line(): Fold one corpus line into the agent's state
    - build_report(): Produce the agent's report without mutating state
    """

    # Agent metadata
    name: ClassVar[str]
    agent_type: ClassVar[AgentType]
    description: ClassVar[str]

    def __init__(self, top_k: int = 10):
        if top_k < 0:
            raise ValueError(f"top_k must be non-negative, got {top_k}")
        self.top_k = top_k

    @abstractmethod
    def process_line(self, word: str) -> None:
        """
        Fold one corpus line into this agent's state.

        Args:
            word: The line with its terminator already stripped
        """
        pass

    @abstractmethod
    def build_report(self) -> AgentReport:
        """
        Build the end-of-run report.

        Must be read-only so it can be called any number of times.

        Returns:
            AgentReport with summary lines and tables
        """
        pass

    def ranked_rows(
        self,
        counts: dict,
        total: int,
        label=str,
    ) -> tuple[ReportRow, ...]:
        """Top-k rows of (label, count, % of total)."""
        return tuple(
            (label(key), count, percentage(count, total))
            for key, count in top_k(counts, self.top_k)
        )

    def make_report(
        self,
        title: str,
        summary: Iterable[str] = (),
        tables: Iterable[ReportTable] = (),
    ) -> AgentReport:
        return AgentReport(
            agent=self.name,
            title=title,
            summary=tuple(summary),
            tables=tuple(tables),
        )
