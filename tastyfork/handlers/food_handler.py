"""
handlers/food_handler.py – FoodHandler class.
Responsibility: catalog listing, detail, add and update.
"""
import logging
from typing import Optional

from ..db.store import MarketStore
from ..models import FoodCreate, FoodUpdate, Document

logger = logging.getLogger(__name__)


class FoodHandler:
    """Handles /foods, /food/{id}, /my_foods, /add_food, /update_food/{id}."""

    def __init__(self, store: MarketStore) -> None:
        self._store = store

    async def browse(self, search: Optional[str], limit: Optional[int]) -> list[Document]:
        if search:
            logger.debug(f"Food search: {search!r}")
        return await self._store.list_foods(search, limit or 0)

    async def get(self, food_id: str) -> Optional[Document]:
        return await self._store.get_food(food_id)

    async def mine(self, email: str) -> list[Document]:
        return await self._store.foods_for_email(email)

    async def add(self, food: FoodCreate) -> Document:
        data = food.model_dump(exclude_unset=True)
        data.update(food.model_extra or {})
        data.setdefault("purchaseCount", food.purchaseCount)
        return await self._store.insert_food(data)

    async def update(self, food_id: str, food: FoodUpdate) -> Document:
        return await self._store.update_food(food_id, food.model_dump())
