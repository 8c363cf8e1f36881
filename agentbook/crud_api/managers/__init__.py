"""Data access managers for the CRUD API.

Each module provides async functions that encapsulate one table's
operations.  Managers accept ``AsyncSession`` as a parameter and raise
domain exceptions (``LookupError``), never HTTP exceptions -- that
translation is the router's responsibility.  Store failures propagate as
``SQLAlchemyError`` and are mapped once, in ``agentbook.crud_api.errors``.
"""
