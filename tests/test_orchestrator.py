"""Tests for the agent catalog and the analysis orchestrator."""

import pytest

from passpal.core.exceptions import AgentIndexError, SelectionError
from passpal.models.schemas import AgentReport, AgentType
from passpal.services.agents import (
    Agent,
    AgentRegistry,
    CharsetPositionAgent,
    LengthFrequencyAgent,
    WordFrequencyAgent,
)
from passpal.services.pipeline.orchestrator import AnalysisOrchestrator


class RecordingAgent(Agent):
    """Agent that records the order in which it sees lines."""

    name = "RecordingAgent"
    description = "test agent"

    def __init__(self, label: str, log: list, top_k: int = 10):
        super().__init__(top_k)
        self.label = label
        self.log = log

    def process_line(self, word: str) -> None:
        self.log.append((self.label, word))

    def build_report(self) -> AgentReport:
        return self.make_report(self.label, summary=[f"seen {len(self.log)}"])


class ExplodingAgent(Agent):
    """Agent that fails on a specific word."""

    name = "ExplodingAgent"
    description = "test agent"

    def __init__(self, top_k: int = 10):
        super().__init__(top_k)
        self.seen = 0

    def process_line(self, word: str) -> None:
        if word == "boom":
            raise RuntimeError("cannot handle boom")
        self.seen += 1

    def build_report(self) -> AgentReport:
        return self.make_report("Exploding", summary=[f"seen {self.seen}"])


class SilentAgent(Agent):
    """Agent that never reports anything."""

    name = "SilentAgent"
    description = "test agent"

    def process_line(self, word: str) -> None:
        pass

    def build_report(self) -> AgentReport:
        return self.make_report("Silent")


class TestAgentRegistry:
    """Test the fixed agent catalog."""

    def test_catalog_order(self):
        assert [info.agent_type for info in AgentRegistry.describe()] == [
            AgentType.WORD_FREQUENCY,
            AgentType.BASE_WORD_FREQUENCY,
            AgentType.LENGTH_FREQUENCY,
            AgentType.CHARSET_FREQUENCY,
            AgentType.HASHCAT_MASK_FREQUENCY,
            AgentType.CHARSET_POSITION,
            AgentType.CHARACTER_FREQUENCY,
            AgentType.SYMBOL_FREQUENCY,
        ]

    def test_indices_are_one_based(self):
        infos = AgentRegistry.describe()
        assert [info.index for info in infos] == list(range(1, 9))
        assert AgentRegistry.get(1) is WordFrequencyAgent

    def test_default_selects_all(self):
        assert AgentRegistry.select() == list(AgentRegistry.catalog())

    def test_include_keeps_catalog_order(self):
        assert AgentRegistry.select(include=[3, 1, 3]) == [WordFrequencyAgent, LengthFrequencyAgent]

    def test_exclude(self):
        selected = AgentRegistry.select(exclude=[6])
        assert len(selected) == 7
        assert CharsetPositionAgent not in selected

    def test_include_and_exclude_conflict(self):
        with pytest.raises(SelectionError):
            AgentRegistry.select(include=[1], exclude=[2])

    @pytest.mark.parametrize("index", [0, 9, -1])
    def test_out_of_range(self, index):
        with pytest.raises(AgentIndexError):
            AgentRegistry.select(include=[index])
        with pytest.raises(AgentIndexError):
            AgentRegistry.select(exclude=[index])

    def test_non_integer_index(self):
        with pytest.raises(SelectionError):
            AgentRegistry.select(include=["1"])

    def test_create_passes_top_k(self):
        agents = AgentRegistry.create(top_k=3, include=[1, 5])
        assert [agent.top_k for agent in agents] == [3, 3]


class TestAnalysisOrchestrator:
    """Test dispatch, reporting and failure isolation."""

    def test_selection_validated_at_construction(self):
        with pytest.raises(AgentIndexError):
            AnalysisOrchestrator(include=[42])

    def test_line_dispatched_to_every_agent_before_next(self):
        log = []
        orchestrator = AnalysisOrchestrator(
            agents=[RecordingAgent("a", log), RecordingAgent("b", log)]
        )
        orchestrator.run(["x", "y"])
        assert log == [("a", "x"), ("b", "x"), ("a", "y"), ("b", "y")]

    def test_reports_in_catalog_order(self):
        result = AnalysisOrchestrator(top_k=2, include=[3, 1]).run(["abc123", "abc123", "ABCD"])
        assert result.lines_processed == 3
        assert [report.agent for report in result.reports] == [
            "WordFrequencyAgent",
            "LengthFrequencyAgent",
        ]

    def test_word_frequency_end_to_end(self):
        result = AnalysisOrchestrator(top_k=2).run(["abc123", "abc123", "ABCD"])
        words = result.reports[0]
        assert words.tables[0].rows == (("abc123", 2, 66.6667), ("ABCD", 1, 33.3333))
        assert "Unique words: 2 (66.67 %)" in words.summary

    def test_failing_agent_is_isolated_and_marked(self):
        exploding = ExplodingAgent()
        words = WordFrequencyAgent()
        orchestrator = AnalysisOrchestrator(agents=[exploding, words])

        result = orchestrator.run(["a", "boom", "b"])

        assert words.total == 3
        assert exploding.seen == 1
        failed = result.reports[0]
        assert failed.agent == "ExplodingAgent"
        assert "cannot handle boom" in failed.error
        assert not failed.is_empty
        assert "ExplodingAgent" in orchestrator.failures
        assert result.reports[1].error is None

    def test_empty_reports_filtered(self):
        result = AnalysisOrchestrator(agents=[SilentAgent(), WordFrequencyAgent()]).run(["a"])
        assert len(result.reports) == 2
        assert [report.agent for report in result.non_empty_reports] == ["WordFrequencyAgent"]

    def test_profiling(self):
        result = AnalysisOrchestrator(include=[1, 2], profile=True).run(["a", "b"])
        assert [timing.agent for timing in result.timings] == [
            "WordFrequencyAgent",
            "BaseWordFrequencyAgent",
        ]
        assert all(timing.analyze_seconds >= 0 for timing in result.timings)

    def test_no_timings_without_profiling(self):
        result = AnalysisOrchestrator(include=[1]).run(["a"])
        assert result.timings == []
