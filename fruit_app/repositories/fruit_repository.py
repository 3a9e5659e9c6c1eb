# fruit_app/repositories/fruit_repository.py
"""
Data access for the ``fruit`` table.

``FruitRepository`` is the contract the service depends on;
``SqlFruitRepository`` implements it with SQLAlchemy Core.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, List
from uuid import uuid4

from sqlalchemy import insert, select, update
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError

from fruit_app.core.exceptions import (
    ConstraintViolationError,
    StorageUnavailableError,
)
from fruit_app.db.schema import fruit, metadata
from fruit_app.models.fruits import Fruit

logger = logging.getLogger(__name__)

UPSERT_DIALECTS = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}


class FruitRepository(ABC):
    """Persistence operations for fruits."""

    @abstractmethod
    def find_all(self) -> List[Fruit]:
        """Return every stored fruit in storage-default order."""

    @abstractmethod
    def save(self, item: Fruit) -> Fruit:
        """
        Insert or update a fruit.

        A fruit without an id gets a new one; a fruit with an id overwrites
        the row carrying that id, or is inserted under it if there is none.
        Returns the stored representation.
        """


def _row_to_fruit(row) -> Fruit:
    return Fruit(
        id=row["id"],
        name=row["name"],
        color=row["color"],
        price=row["price"],
    )


@contextmanager
def _translate_errors() -> Iterator[None]:
    try:
        yield
    except IntegrityError as exc:
        logger.warning("Constraint violation on fruit table: %s", exc.orig)
        raise ConstraintViolationError(str(exc.orig)) from exc
    except OperationalError as exc:
        logger.error("Storage unavailable: %s", exc.orig)
        raise StorageUnavailableError(str(exc.orig)) from exc
    except DBAPIError as exc:
        if not exc.connection_invalidated:
            raise
        logger.error("Storage connection lost: %s", exc.orig)
        raise StorageUnavailableError(str(exc.orig)) from exc


class SqlFruitRepository(FruitRepository):
    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def create_schema(self) -> None:
        with _translate_errors():
            metadata.create_all(self.engine)

    def find_all(self) -> List[Fruit]:
        with _translate_errors():
            with self.engine.connect() as conn:
                rows = conn.execute(select(fruit)).mappings().all()

        return [_row_to_fruit(row) for row in rows]

    def save(self, item: Fruit) -> Fruit:
        fruit_id = str(item.id) if item.id is not None else str(uuid4())
        values = {
            "id": fruit_id,
            "name": item.name,
            "color": item.color,
            "price": item.price,
        }

        with _translate_errors():
            with self.engine.begin() as conn:
                self._upsert(conn, values)
                row = conn.execute(
                    select(fruit).where(fruit.c.id == fruit_id)
                ).mappings().one()

        logger.info("Saved fruit %s (%s)", fruit_id, item.name)
        return _row_to_fruit(row)

    def _upsert(self, conn: Connection, values: dict) -> None:
        dialect_insert = UPSERT_DIALECTS.get(conn.dialect.name)

        if dialect_insert is not None:
            stmt = dialect_insert(fruit).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[fruit.c.id],
                set_={
                    "name": stmt.excluded.name,
                    "color": stmt.excluded.color,
                    "price": stmt.excluded.price,
                },
            )
            conn.execute(stmt)
            return

        # No native upsert: update first, insert when nothing matched
        result = conn.execute(
            update(fruit)
            .where(fruit.c.id == values["id"])
            .values(name=values["name"], color=values["color"], price=values["price"])
        )
        if result.rowcount == 0:
            conn.execute(insert(fruit).values(**values))
