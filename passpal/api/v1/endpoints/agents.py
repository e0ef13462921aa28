from fastapi import APIRouter

from passpal.models.schemas import AgentListResponse
from passpal.services.agents.registry import AgentRegistry

router = APIRouter()


@router.get(
    "",
    response_model=AgentListResponse,
    summary="List analysis agents",
    description="The agent catalog, in the order agents run. Indices are 1-based.",
)
async def list_agents() -> AgentListResponse:
    return AgentListResponse(agents=AgentRegistry.describe())
