"""SQLAlchemy implementation of StateRepository."""

import json
import logging
from typing import Any, Mapping

from sqlalchemy.orm import Session

from divcalc.repositories.sqlalchemy.orm_models import AppStateORM

logger = logging.getLogger(__name__)


class SqlAlchemyStateRepository:
    """SQLAlchemy-backed key -> JSON value repository."""

    def __init__(self, db: Session):
        self._db = db

    def load(self, key: str, default: Any) -> Any:
        """Return the stored value, falling back to default when absent or corrupt."""
        # Always re-read the row; another session may have committed since
        orm_state = self._db.get(AppStateORM, key, populate_existing=True)
        if orm_state is None:
            return default
        try:
            return json.loads(orm_state.value_json)
        except json.JSONDecodeError as e:
            logger.error("Failed to load %s from storage: %s", key, e)
            return default

    def save(self, key: str, value: Any) -> None:
        """Insert or replace the value stored under key."""
        self.save_many({key: value})

    def save_many(self, values: Mapping[str, Any]) -> None:
        """Insert or replace several values in a single commit."""
        encoded = {key: json.dumps(value) for key, value in values.items()}
        try:
            for key, value_json in encoded.items():
                orm_state = self._db.get(AppStateORM, key)
                if orm_state is None:
                    self._db.add(AppStateORM(key=key, value_json=value_json))
                else:
                    orm_state.value_json = value_json
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise

    def delete(self, key: str) -> None:
        """Remove the stored value for key."""
        self._db.query(AppStateORM).filter(AppStateORM.key == key).delete()
        self._db.commit()
