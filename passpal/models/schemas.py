from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class AgentType(str, Enum):
    """Analysis agents available in the catalog."""

    WORD_FREQUENCY = "word_frequency"
    BASE_WORD_FREQUENCY = "base_word_frequency"
    LENGTH_FREQUENCY = "length_frequency"
    CHARSET_FREQUENCY = "charset_frequency"
    HASHCAT_MASK_FREQUENCY = "hashcat_mask_frequency"
    CHARSET_POSITION = "charset_position"
    CHARACTER_FREQUENCY = "character_frequency"
    SYMBOL_FREQUENCY = "symbol_frequency"


# ============================================================================
# Report Schemas
# ============================================================================

Cell = str | int | float
ReportRow = tuple[Cell, ...]


class ReportTable(BaseModel):
    """A titled table of report rows, handed verbatim to a renderer."""

    model_config = ConfigDict(frozen=True)

    title: str
    columns: tuple[str, ...]
    rows: tuple[ReportRow, ...] = ()

    # Columns whose cells are percentages
    percent_columns: tuple[str, ...] = ("Of total",)


class AgentReport(BaseModel):
    """Everything one agent reports at the end of a run."""

    model_config = ConfigDict(frozen=True)

    agent: str
    title: str
    summary: tuple[str, ...] = ()
    tables: tuple[ReportTable, ...] = ()
    error: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.summary or self.tables or self.error)


class AgentTiming(BaseModel):
    """Wall-clock time spent inside one agent."""

    agent: str
    analyze_seconds: float = 0.0
    report_seconds: float = 0.0


class AgentInfo(BaseModel):
    """A catalog entry as exposed for selection."""

    index: int = Field(ge=1)
    agent_type: AgentType
    name: str
    description: str


# ============================================================================
# Request Schemas
# ============================================================================


class AnalyzeRequest(BaseModel):
    """Request schema for /analyze endpoint."""

    corpus: str = Field(description="Newline separated candidates")
    top_k: int | None = Field(default=None, ge=0)
    include: list[int] | None = None
    exclude: list[int] | None = None


# ============================================================================
# Response Schemas
# ============================================================================


class AnalyzeResponse(BaseModel):
    """Response schema for /analyze endpoint."""

    lines_processed: int
    reports: list[AgentReport]


class AgentListResponse(BaseModel):
    """Response schema for /agents endpoint."""

    agents: list[AgentInfo]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
