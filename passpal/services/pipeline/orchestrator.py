"""
Analysis orchestrator - drives the selected agents over a corpus.

Every line is dispatched to every active agent, in catalog order, before
the next line is read. Reports are collected in the same order once the
stream ends.
"""

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field

from passpal.core.exceptions import AgentError
from passpal.models.schemas import AgentReport, AgentTiming
from passpal.services.agents.base import Agent
from passpal.services.agents.registry import AgentRegistry

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Result of one analysis run."""

    lines_processed: int
    reports: list[AgentReport]

    # Only filled when profiling is enabled
    timings: list[AgentTiming] = field(default_factory=list)

    @property
    def non_empty_reports(self) -> list[AgentReport]:
        return [report for report in self.reports if not report.is_empty]


class AnalysisOrchestrator:
    """
    Runs a fixed set of agents over a stream of words.

    An agent that raises is logged, taken out of the dispatch loop and
    reported with an error marker; the remaining agents carry on.
    """

    def __init__(
        self,
        top_k: int = 10,
        include: Iterable[int] | None = None,
        exclude: Iterable[int] | None = None,
        profile: bool = False,
        agents: list[Agent] | None = None,
    ):
        # Selection is validated here, before any line is read
        self.agents: list[Agent] = (
            agents if agents is not None else AgentRegistry.create(top_k, include, exclude)
        )
        self.profile = profile
        self.lines_processed = 0
        self._failures: dict[int, AgentError] = {}
        self._timings = [AgentTiming(agent=agent.name) for agent in self.agents]

    def process_line(self, word: str) -> None:
        """Dispatch one line to every active agent."""
        self.lines_processed += 1
        for index, agent in enumerate(self.agents):
            if index in self._failures:
                continue
            start = time.perf_counter() if self.profile else 0.0
            try:
                agent.process_line(word)
            except Exception as e:
                self._fail(index, "analyzing", e)
            if self.profile:
                self._timings[index].analyze_seconds += time.perf_counter() - start

    def build_reports(self) -> list[AgentReport]:
        """Collect every agent's report in catalog order."""
        reports = []
        for index, agent in enumerate(self.agents):
            if index not in self._failures:
                start = time.perf_counter() if self.profile else 0.0
                try:
                    reports.append(agent.build_report())
                except Exception as e:
                    self._fail(index, "reporting", e)
                if self.profile:
                    self._timings[index].report_seconds += time.perf_counter() - start
            if index in self._failures:
                reports.append(
                    AgentReport(
                        agent=agent.name,
                        title=agent.name,
                        error=self._failures[index].message,
                    )
                )
        return reports

    def run(self, lines: Iterable[str]) -> AnalysisResult:
        """
        Stream a corpus through the agents and build all reports.

        Args:
            lines: Corpus lines with terminators already stripped

        Returns:
            AnalysisResult with reports in catalog order
        """
        logger.info(
            "Running %d agent(s): %s",
            len(self.agents),
            ", ".join(agent.name for agent in self.agents),
        )
        for line in lines:
            self.process_line(line)
        logger.info("Processed %d line(s), building reports", self.lines_processed)

        reports = self.build_reports()
        return AnalysisResult(
            lines_processed=self.lines_processed,
            reports=reports,
            timings=list(self._timings) if self.profile else [],
        )

    @property
    def failures(self) -> dict[str, AgentError]:
        return {self.agents[index].name: error for index, error in self._failures.items()}

    def _fail(self, index: int, phase: str, cause: Exception) -> None:
        agent = self.agents[index]
        error = AgentError(agent.name, phase, cause)
        logger.exception(error.message)
        self._failures[index] = error
