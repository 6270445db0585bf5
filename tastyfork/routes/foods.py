"""routes/foods.py – food catalog endpoints.

  GET   /foods              → list / search, most purchased first
  GET   /food/{id}          → single food or null
  GET   /my_foods           → foods for the logged-in user (token required)
  POST  /add_food           → insert a food
  PATCH /update_food/{id}   → overwrite the descriptive fields
"""
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..core.auth import require_user, ensure_owner
from ..deps import get_food_handler
from ..models import FoodCreate, FoodUpdate, InsertResult, UpdateResult, Document

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Foods"])

MAX_LIMIT = 1000


@router.get("/foods", response_model=list[Document])
async def list_foods(
    search: Optional[str] = Query(default=None, description="Case-insensitive match on food_name"),
    limit:  Optional[int] = Query(default=None, ge=0, le=MAX_LIMIT, description="Max results; 0 or absent = all"),
):
    try:
        return await get_food_handler().browse(search, limit)
    except Exception as e:
        logger.exception("list foods failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/food/{food_id}", response_model=Optional[Document])
async def get_food(food_id: str):
    try:
        return await get_food_handler().get(food_id)
    except Exception as e:
        logger.exception("get food failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/my_foods", response_model=list[Document])
async def my_foods(
    email: Optional[str] = Query(default=None),
    user:  dict[str, Any] = Depends(require_user),
):
    ensure_owner(user, email)
    try:
        return await get_food_handler().mine(email)
    except Exception as e:
        logger.exception("my foods failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/add_food", response_model=InsertResult)
async def add_food(food: FoodCreate):
    try:
        return await get_food_handler().add(food)
    except Exception as e:
        logger.exception("add food failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.patch("/update_food/{food_id}", response_model=UpdateResult)
async def update_food(food_id: str, food: FoodUpdate):
    try:
        return await get_food_handler().update(food_id, food)
    except Exception as e:
        logger.exception("update food failed")
        raise HTTPException(status_code=500, detail=str(e))
