"""SQLAlchemy ORM models for the external ``sample`` database.

The schema belongs to the database, not to this service: these classes only
describe the existing ``agents`` and ``company`` tables so queries stay typed
and parameterized.  Tests use ``Base.metadata`` to provision throwaway
databases; production never calls ``create_all``.

Column names are kept upper-case to match the existing tables.  Python
attribute names are snake_case.
"""

from __future__ import annotations

from sqlalchemy import Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Agent(Base):
    __tablename__ = "agents"

    agent_code: Mapped[str] = mapped_column("AGENT_CODE", String(6), primary_key=True)
    agent_name: Mapped[str | None] = mapped_column("AGENT_NAME", String(40))
    working_area: Mapped[str | None] = mapped_column("WORKING_AREA", String(35))
    commission: Mapped[float | None] = mapped_column("COMMISSION", Numeric(10, 2, asdecimal=False))
    phone_no: Mapped[str | None] = mapped_column("PHONE_NO", String(15))
    country: Mapped[str | None] = mapped_column("COUNTRY", String(25))


class Company(Base):
    __tablename__ = "company"

    company_id: Mapped[int] = mapped_column("COMPANY_ID", primary_key=True, autoincrement=False)
    company_name: Mapped[str | None] = mapped_column("COMPANY_NAME", String(25))
    company_city: Mapped[str | None] = mapped_column("COMPANY_CITY", String(25))
