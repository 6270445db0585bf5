"""
db/store.py – MarketStore class.
Responsibility: all reads/writes on the `foods` and `orders` collections.

pymongo is blocking, so every call is wrapped in run_in_executor to keep the
event loop free. Documents leave this module JSON-ready (ObjectId → str).
"""
import asyncio
import logging
import re
from functools import partial
from typing import Any, Callable, Optional

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.database import Database

from .session import ping

logger = logging.getLogger(__name__)

FOODS  = "foods"
ORDERS = "orders"

# Fields overwritten by "update food". purchaseCount is deliberately absent.
FOOD_EDITABLE_FIELDS = (
    "food_name", "image", "category", "food_quantity", "price", "country", "description",
)

# "my foods" reads the foods collection by buyer email, as the production
# service always has. See DESIGN.md.
MY_FOODS_OWNER_FIELD = "buyer.email"


def parse_object_id(raw: str) -> Optional[ObjectId]:
    """ObjectId for a valid 24-hex string, else None."""
    if isinstance(raw, str) and ObjectId.is_valid(raw):
        return ObjectId(raw)
    return None


def to_json(value: Any) -> Any:
    """Recursively replace ObjectIds so FastAPI can serialize the document."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_json(v) for v in value]
    return value


class MarketStore:
    """Document store adapter for the food marketplace."""

    def __init__(self, db: Database) -> None:
        self._db     = db
        self._foods  = db[FOODS]
        self._orders = db[ORDERS]

    # ── Public: Foods ──────────────────────────────────────────────────────────

    async def list_foods(self, search: Optional[str] = None, limit: int = 0) -> list[dict]:
        """Foods sorted by purchaseCount desc; `limit` 0 means no cap."""
        return await self._run(self._fetch_foods, search, limit)

    async def get_food(self, food_id: str) -> Optional[dict]:
        return await self._run(self._fetch_food, food_id)

    async def foods_for_email(self, email: str) -> list[dict]:
        return await self._run(self._find_all, self._foods, {MY_FOODS_OWNER_FIELD: email})

    async def insert_food(self, food: dict) -> dict:
        return await self._run(self._insert, self._foods, food)

    async def update_food(self, food_id: str, fields: dict) -> dict:
        """Full overwrite of FOOD_EDITABLE_FIELDS; missing keys become null."""
        return await self._run(self._do_update_food, food_id, fields)

    async def increment_purchase_count(self, food_id: str) -> dict:
        return await self._run(self._do_increment, food_id)

    # ── Public: Orders ─────────────────────────────────────────────────────────

    async def insert_order(self, order: dict) -> dict:
        return await self._run(self._insert, self._orders, order)

    async def orders_for_email(self, email: str) -> list[dict]:
        return await self._run(self._find_all, self._orders, {"user_email": email})

    async def delete_order(self, order_id: str) -> dict:
        return await self._run(self._do_delete_order, order_id)

    # ── Public: System ─────────────────────────────────────────────────────────

    async def ping(self) -> bool:
        return await self._run(ping, self._db)

    # ── Private ────────────────────────────────────────────────────────────────

    async def _run(self, fn: Callable, *args):
        return await asyncio.get_running_loop().run_in_executor(None, partial(fn, *args))

    def _fetch_foods(self, search: Optional[str], limit: int) -> list[dict]:
        query: dict = {}
        if search:
            query = {"food_name": {"$regex": re.escape(search), "$options": "i"}}
        cursor = self._foods.find(query).sort("purchaseCount", DESCENDING)
        if limit:
            cursor = cursor.limit(limit)
        return [to_json(d) for d in cursor]

    def _fetch_food(self, food_id: str) -> Optional[dict]:
        oid = parse_object_id(food_id)
        if oid is None:
            return None
        return to_json(self._foods.find_one({"_id": oid}))

    def _find_all(self, collection, query: dict) -> list[dict]:
        return [to_json(d) for d in collection.find(query)]

    def _insert(self, collection, doc: dict) -> dict:
        result = collection.insert_one(dict(doc))
        return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}

    def _do_update_food(self, food_id: str, fields: dict) -> dict:
        oid = parse_object_id(food_id)
        if oid is None:
            return _update_result(None)
        update = {"$set": {f: fields.get(f) for f in FOOD_EDITABLE_FIELDS}}
        return _update_result(self._foods.update_one({"_id": oid}, update))

    def _do_increment(self, food_id: str) -> dict:
        oid = parse_object_id(food_id)
        if oid is None:
            raise ValueError(f"food_id={food_id!r} is not a valid ObjectId")
        result = self._foods.update_one({"_id": oid}, {"$inc": {"purchaseCount": 1}})
        return _update_result(result)

    def _do_delete_order(self, order_id: str) -> dict:
        oid = parse_object_id(order_id)
        if oid is None:
            return {"acknowledged": True, "deletedCount": 0}
        result = self._orders.delete_one({"_id": oid})
        return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}


def _update_result(result) -> dict:
    if result is None:
        return {"acknowledged": True, "matchedCount": 0, "modifiedCount": 0,
                "upsertedCount": 0, "upsertedId": None}
    upserted = result.upserted_id
    return {
        "acknowledged":  result.acknowledged,
        "matchedCount":  result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedCount": 0 if upserted is None else 1,
        "upsertedId":    None if upserted is None else str(upserted),
    }
