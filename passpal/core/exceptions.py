from typing import Any


class PasspalError(Exception):
    """Base exception for all passpal errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(PasspalError):
    """Raised when input validation fails."""

    pass


class SelectionError(ValidationError):
    """Raised when an agent selection is invalid."""

    pass


class AgentIndexError(SelectionError):
    """Raised when a selection names an index outside the catalog."""

    def __init__(self, index: int, catalog_size: int):
        super().__init__(
            f"Agent index {index} is out of range (1-{catalog_size})",
            {"index": index, "catalog_size": catalog_size},
        )


class CorpusError(PasspalError):
    """Raised when the corpus cannot be opened, read or decoded."""

    pass


class MaskCodecError(PasspalError):
    """Raised when a mask cannot be encoded or decoded."""

    pass


class AgentError(PasspalError):
    """
    Records an agent failure during processing or reporting.

    Never raised; the orchestrator builds one and keeps it as the failed
    agent's report error marker.
    """

    def __init__(self, agent_name: str, phase: str, cause: Exception):
        super().__init__(
            f"Agent '{agent_name}' failed while {phase}: {cause}",
            {"agent_name": agent_name, "phase": phase, "cause": repr(cause)},
        )
