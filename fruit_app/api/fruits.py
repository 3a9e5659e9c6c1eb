# fruit_app/api/fruits.py

from typing import List

from fastapi import APIRouter, Depends, Request

from fruit_app.models.fruits import Fruit
from fruit_app.services.fruit_service import FruitService

router = APIRouter(prefix="/api/fruits", tags=["fruits"])


def get_fruit_service(request: Request) -> FruitService:
    return request.app.state.fruit_service


@router.get("", response_model=List[Fruit])
def list_fruits(service: FruitService = Depends(get_fruit_service)) -> List[Fruit]:
    """
    Return every stored fruit.
    """
    return service.get_all_fruits()


@router.post("", response_model=Fruit)
def create_fruit(
    item: Fruit,
    service: FruitService = Depends(get_fruit_service),
) -> Fruit:
    """
    Create a fruit, or overwrite the one carrying the submitted id.
    """
    return service.save_fruit(item)
