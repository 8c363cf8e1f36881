"""Agent CRUD operations.

Agents are keyed by ``AGENT_CODE``.  Uniqueness is enforced by the store:
inserting an existing code surfaces as ``IntegrityError``.
"""

from __future__ import annotations

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agentbook.crud_api.db.tables import Agent
from agentbook.crud_api.models.api import AgentCreate, AgentPatch, AgentReplace


class AgentNotFoundError(LookupError):
    """Raised when no agent has the given code."""


async def list_agents(db: AsyncSession) -> list[Agent]:
    """Return every agent, ordered by code."""
    result = await db.execute(select(Agent).order_by(Agent.agent_code))
    return list(result.scalars().all())


async def get_agent(db: AsyncSession, agent_code: str) -> Agent:
    """Get an agent by code.  Raises ``AgentNotFoundError`` if missing."""
    agent = await db.get(Agent, agent_code)
    if agent is None:
        raise AgentNotFoundError(agent_code)
    return agent


async def create_agent(db: AsyncSession, body: AgentCreate) -> Agent:
    """Insert a new agent and return it."""
    agent = Agent(**body.model_dump())
    db.add(agent)
    await db.commit()
    logger.info("Agent {} created", agent.agent_code)
    return agent


async def patch_agent(db: AsyncSession, agent_code: str, body: AgentPatch) -> Agent:
    """Apply only the fields the caller supplied.  Raises ``AgentNotFoundError``."""
    agent = await get_agent(db, agent_code)
    changes = body.model_dump(exclude_unset=True)
    for key, value in changes.items():
        setattr(agent, key, value)
    await db.commit()
    logger.info("Agent {} patched ({})", agent_code, ", ".join(sorted(changes)))
    return agent


async def replace_agent(db: AsyncSession, agent_code: str, body: AgentReplace) -> Agent:
    """Overwrite all five updatable fields.  Raises ``AgentNotFoundError``."""
    agent = await get_agent(db, agent_code)
    for key, value in body.model_dump().items():
        setattr(agent, key, value)
    await db.commit()
    logger.info("Agent {} replaced", agent_code)
    return agent


async def delete_agent(db: AsyncSession, agent_code: str) -> None:
    """Delete an agent.  Raises ``AgentNotFoundError`` if missing."""
    agent = await get_agent(db, agent_code)
    await db.delete(agent)
    await db.commit()
    logger.info("Agent {} deleted", agent_code)
