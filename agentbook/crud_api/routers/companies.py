"""Company REST endpoints (list and create only)."""

from __future__ import annotations

from fastapi import APIRouter

from agentbook.crud_api.db.tables import Company
from agentbook.crud_api.deps import DbSession
from agentbook.crud_api.errors import BAD_REQUEST_RESPONSE, SERVER_ERROR_RESPONSE
from agentbook.crud_api.managers import companies as manager
from agentbook.crud_api.models.api import CompanyCreate, CompanyCreated, CompanyResponse

router = APIRouter(prefix="/companies", tags=["companies"], responses=SERVER_ERROR_RESPONSE)


@router.get("", response_model=list[CompanyResponse], summary="Get all companies")
async def list_companies(db: DbSession) -> list[Company]:
    return await manager.list_companies(db)


@router.post("", response_model=CompanyCreated, summary="Create a new company", responses=BAD_REQUEST_RESPONSE)
async def create_company(body: CompanyCreate, db: DbSession) -> CompanyCreated:
    company = await manager.create_company(db, body)
    return CompanyCreated(company_id=str(company.company_id))
