from .fruit_repository import FruitRepository, SqlFruitRepository

__all__ = ["FruitRepository", "SqlFruitRepository"]
