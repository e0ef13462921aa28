import logging

from fastapi import APIRouter

from passpal.core.exceptions import PasspalError, ValidationError
from passpal.dependencies import SettingsDep
from passpal.models.schemas import AnalyzeRequest, AnalyzeResponse, ErrorResponse
from passpal.services.pipeline.corpus import text_lines
from passpal.services.pipeline.orchestrator import AnalysisOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=AnalyzeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        500: {"model": ErrorResponse, "description": "Analysis failed"},
    },
    summary="Analyze a password corpus",
    description=(
        "Run the selected agents over a newline separated corpus and "
        "return each agent's report as structured tables."
    ),
)
async def analyze_corpus(
    request: AnalyzeRequest,
    settings: SettingsDep,
) -> AnalyzeResponse:
    """
    Analyze a corpus posted in the request body.

    The analysis pipeline:
    1. Validate corpus size and agent selection
    2. Stream every line through the selected agents
    3. Collect reports in catalog order

    Selection and size errors propagate as ValidationError and are
    rendered by the application's error handlers.
    """
    # Validate corpus length
    if len(request.corpus) > settings.max_corpus_length:
        raise ValidationError(
            f"Corpus exceeds maximum length of {settings.max_corpus_length}",
            {"length": len(request.corpus), "max_corpus_length": settings.max_corpus_length},
        )

    top_k = request.top_k if request.top_k is not None else settings.top_k

    orchestrator = AnalysisOrchestrator(
        top_k=top_k,
        include=request.include,
        exclude=request.exclude,
    )

    try:
        result = orchestrator.run(text_lines(request.corpus))
    except Exception as e:
        logger.exception("Analysis failed")
        raise PasspalError(f"Analysis failed: {e}", {"cause": repr(e)}) from e

    return AnalyzeResponse(
        lines_processed=result.lines_processed,
        reports=result.reports,
    )
