"""Agent REST endpoints.

Thin HTTP adapter -- delegates to the agents manager and maps
``AgentNotFoundError`` to 404.  Store failures are handled app-wide.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from agentbook.crud_api.db.tables import Agent
from agentbook.crud_api.deps import DbSession
from agentbook.crud_api.errors import BAD_REQUEST_RESPONSE, NOT_FOUND_RESPONSE, SERVER_ERROR_RESPONSE
from agentbook.crud_api.managers import agents as manager
from agentbook.crud_api.models.api import (
    AgentCreate,
    AgentCreated,
    AgentPatch,
    AgentReplace,
    AgentResponse,
    MessageResponse,
)

router = APIRouter(prefix="/agents", tags=["agents"], responses=SERVER_ERROR_RESPONSE)


def _not_found(agent_code: str) -> HTTPException:
    return HTTPException(status.HTTP_404_NOT_FOUND, detail=f"Agent '{agent_code}' not found.")


@router.get("", response_model=list[AgentResponse], summary="Get all agents")
async def list_agents(db: DbSession) -> list[Agent]:
    return await manager.list_agents(db)


@router.get(
    "/{agent_code}", response_model=AgentResponse, summary="Get an agent by code", responses=NOT_FOUND_RESPONSE
)
async def get_agent(agent_code: str, db: DbSession) -> Agent:
    try:
        return await manager.get_agent(db, agent_code)
    except manager.AgentNotFoundError:
        raise _not_found(agent_code) from None


@router.post("", response_model=AgentCreated, summary="Create a new agent", responses=BAD_REQUEST_RESPONSE)
async def create_agent(body: AgentCreate, db: DbSession) -> AgentCreated:
    agent = await manager.create_agent(db, body)
    return AgentCreated(agent_id=agent.agent_code)


@router.patch(
    "/{agent_code}",
    response_model=MessageResponse,
    summary="Update some of an agent's details",
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
)
async def patch_agent(agent_code: str, body: AgentPatch, db: DbSession) -> MessageResponse:
    """Update only the supplied fields.  Unknown fields are rejected with 400."""
    try:
        await manager.patch_agent(db, agent_code, body)
    except manager.AgentNotFoundError:
        raise _not_found(agent_code) from None
    return MessageResponse(message="Agent updated successfully")


@router.put(
    "/{agent_code}",
    response_model=MessageResponse,
    summary="Replace all of an agent's details",
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
)
async def replace_agent(agent_code: str, body: AgentReplace, db: DbSession) -> MessageResponse:
    """All five detail fields are required and must be non-empty / non-zero."""
    try:
        await manager.replace_agent(db, agent_code, body)
    except manager.AgentNotFoundError:
        raise _not_found(agent_code) from None
    return MessageResponse(message="Agent updated successfully")


@router.delete(
    "/{agent_code}", response_model=MessageResponse, summary="Delete an agent by code", responses=NOT_FOUND_RESPONSE
)
async def delete_agent(agent_code: str, db: DbSession) -> MessageResponse:
    try:
        await manager.delete_agent(db, agent_code)
    except manager.AgentNotFoundError:
        raise _not_found(agent_code) from None
    return MessageResponse(message="Agent deleted successfully")
