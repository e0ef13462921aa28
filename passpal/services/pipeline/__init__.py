"""
Pipeline services for corpus analysis.

1. Stream the corpus line by line (CorpusReader)
2. Dispatch each line to the selected agents (AnalysisOrchestrator)
3. Collect the agents' reports in catalog order
"""

from passpal.services.pipeline.corpus import CorpusReader
from passpal.services.pipeline.orchestrator import AnalysisOrchestrator, AnalysisResult

__all__ = [
    "CorpusReader",
    "AnalysisOrchestrator",
    "AnalysisResult",
]
