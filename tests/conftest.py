from typing import Dict, List
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from fruit_app.core.config import Settings
from fruit_app.db.engine import get_engine
from fruit_app.main import create_app
from fruit_app.models.fruits import Fruit
from fruit_app.repositories.fruit_repository import (
    FruitRepository,
    SqlFruitRepository,
)


class InMemoryFruitRepository(FruitRepository):
    """Dict-backed repository that records the calls it receives."""

    def __init__(self):
        self.rows: Dict[str, Fruit] = {}
        self.saved: List[Fruit] = []

    def find_all(self) -> List[Fruit]:
        return list(self.rows.values())

    def save(self, item: Fruit) -> Fruit:
        self.saved.append(item)
        stored = item.model_copy(update={"id": item.id or uuid4()})
        self.rows[str(stored.id)] = stored
        return stored


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", create_schema_on_startup=True)


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def repository():
    engine = get_engine("sqlite://")
    repo = SqlFruitRepository(engine)
    repo.create_schema()
    yield repo
    engine.dispose()


@pytest.fixture
def memory_repository():
    return InMemoryFruitRepository()
