"""Company operations.  Only listing and creation are exposed."""

from __future__ import annotations

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agentbook.crud_api.db.tables import Company
from agentbook.crud_api.models.api import CompanyCreate


async def list_companies(db: AsyncSession) -> list[Company]:
    result = await db.execute(select(Company).order_by(Company.company_id))
    return list(result.scalars().all())


async def create_company(db: AsyncSession, body: CompanyCreate) -> Company:
    """Insert a new company.  A duplicate id surfaces as ``IntegrityError``."""
    company = Company(**body.model_dump())
    db.add(company)
    await db.commit()
    logger.info("Company {} created", company.company_id)
    return company
