"""
CRUD operations for local store models.

Exports the generic record CRUD class and one pre-instantiated CRUD per
logical table.

Usage:
    from studyeasier.boundary.db.CRUD import TABLE_CRUDS

    crud = TABLE_CRUDS["chats"]
    await crud.upsert(session, chat.id, payload)
"""

from studyeasier.boundary.db.CRUD.base_crud import BaseCRUD
from studyeasier.boundary.db.models import TABLE_MODELS

TABLE_CRUDS: dict[str, BaseCRUD] = {
    table: BaseCRUD(model) for table, model in TABLE_MODELS.items()
}

__all__ = [
    "BaseCRUD",
    "TABLE_CRUDS",
]
