# fruit_app/services/fruit_service.py

import logging
from typing import List

from fruit_app.models.fruits import Fruit
from fruit_app.repositories.fruit_repository import FruitRepository

logger = logging.getLogger(__name__)


class FruitService:
    """Thin façade over the repository; holds no state between calls."""

    def __init__(self, repository: FruitRepository) -> None:
        self.repository = repository

    def get_all_fruits(self) -> List[Fruit]:
        logger.debug("Listing fruits")
        return self.repository.find_all()

    def save_fruit(self, item: Fruit) -> Fruit:
        logger.debug("Saving fruit id=%s", item.id)
        return self.repository.save(item)
