from .fruit_service import FruitService

__all__ = ["FruitService"]
