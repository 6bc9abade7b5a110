"""
Base repository shared by all data access classes.
"""

from typing import Any, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from hackhub.models import Base


ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository:
    """
    Thin wrapper around a SQLAlchemy session.

    Repositories only add, query and remove rows. They flush so generated
    values and constraint violations surface immediately, but never commit:
    the calling service owns the transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    def _add(self, obj: ModelT) -> ModelT:
        self.db.add(obj)
        self.db.flush()
        return obj

    def _remove(self, obj: Optional[ModelT]) -> Optional[ModelT]:
        if obj is None:
            return None
        self.db.delete(obj)
        self.db.flush()
        return obj

    def _apply(self, obj: Optional[ModelT], fields: dict[str, Any]) -> Optional[ModelT]:
        if obj is None:
            return None
        for key, value in fields.items():
            setattr(obj, key, value)
        self.db.flush()
        return obj

    def _get(self, model: Type[ModelT], pk: Any) -> Optional[ModelT]:
        if pk is None:
            return None
        return self.db.get(model, pk)
