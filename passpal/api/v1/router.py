from fastapi import APIRouter

from passpal.api.v1.endpoints import agents, analyze

api_router = APIRouter()

api_router.include_router(
    analyze.router,
    prefix="/analyze",
    tags=["Analysis"],
)

api_router.include_router(
    agents.router,
    prefix="/agents",
    tags=["Agents"],
)
