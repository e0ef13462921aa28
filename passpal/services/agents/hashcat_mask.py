from collections import Counter
from typing import ClassVar

from passpal.models.schemas import AgentReport, AgentType, ReportTable
from passpal.services.agents.base import Agent
from passpal.services.analysis.mask_codec import MaskCodec
from passpal.services.analysis.ranking import density, percentage, top_k


class HashcatMaskFrequencyAgent(Agent):
    """
    Counts hashcat masks (?l?u?d?s) across the corpus.

    Masks are kept in their packed byte form. Empty words and words
    containing a character outside the four classes are tallied as
    unclassified instead.

    Two rankings are reported: by raw count and by count per unit of
    keyspace, which surfaces masks that are far more common than their
    size would suggest.
    """

    name = "HashcatMaskFrequencyAgent"
    agent_type = AgentType.HASHCAT_MASK_FREQUENCY
    description = "Hashcat mask frequency, by count and by count/keyspace"

    COLUMNS: ClassVar[tuple[str, ...]] = ("Mask", "Count", "Of total", "Count/keyspace")

    def __init__(self, top_k: int = 10):
        super().__init__(top_k)
        self.masks: Counter[bytes] = Counter()
        self.unclassified = 0
        self.total = 0

    def process_line(self, word: str) -> None:
        self.total += 1
        mask = MaskCodec.classify(word)
        if not mask:
            self.unclassified += 1
            return
        self.masks[MaskCodec.encode(mask)] += 1

    def _row(self, code: bytes):
        mask = MaskCodec.decode(code)
        count = self.masks[code]
        return (
            MaskCodec.to_hashcat(mask),
            count,
            percentage(count, self.total),
            density(count, MaskCodec.keyspace(mask)),
        )

    def densities(self) -> dict[bytes, float]:
        """Count per unit of keyspace for every observed mask."""
        return {
            code: density(count, MaskCodec.keyspace(MaskCodec.decode(code)))
            for code, count in self.masks.items()
        }

    def build_report(self) -> AgentReport:
        by_count = [self._row(code) for code, _ in top_k(self.masks, self.top_k)]
        by_density = [self._row(code) for code, _ in top_k(self.densities(), self.top_k)]

        unmatched = (
            f"Words that didn't match any ?l?u?d?s mask: {self.unclassified} "
            f"({percentage(self.unclassified, self.total)} %)"
        )
        return self.make_report(
            "Hashcat mask frequency",
            summary=[unmatched],
            tables=[
                ReportTable(
                    title=f"Hashcat mask frequency, sorted by count, top {self.top_k}",
                    columns=self.COLUMNS,
                    rows=tuple(by_count),
                ),
                ReportTable(
                    title=f"Hashcat mask frequency, sorted by count/keyspace, top {self.top_k}",
                    columns=self.COLUMNS,
                    rows=tuple(by_density),
                ),
            ],
        )
