"""routes/orders.py – POST /orders, GET /my_orders, DELETE /my_orders/{id}"""
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..core.auth import require_user, ensure_owner
from ..deps import get_order_handler
from ..models import OrderCreate, InsertResult, DeleteResult, Document

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Orders"])


@router.post("/orders", response_model=InsertResult)
async def place_order(order: OrderCreate):
    """Insert the order, then bump the food's purchaseCount (best-effort)."""
    try:
        return await get_order_handler().place(order)
    except Exception as e:
        logger.exception("place order failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/my_orders", response_model=list[Document])
async def my_orders(
    email: Optional[str] = Query(default=None),
    user:  dict[str, Any] = Depends(require_user),
):
    ensure_owner(user, email)
    try:
        return await get_order_handler().mine(email)
    except Exception as e:
        logger.exception("my orders failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/my_orders/{order_id}", response_model=DeleteResult)
async def cancel_order(order_id: str):
    try:
        return await get_order_handler().cancel(order_id)
    except Exception as e:
        logger.exception("cancel order failed")
        raise HTTPException(status_code=500, detail=str(e))
