"""
models.py – Pydantic schemas for request/response bodies.

Food and order bodies accept extra keys (seller/buyer snapshots etc.) and
store them verbatim.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# ── Request Models ─────────────────────────────────────────────────────────────

class UserClaims(BaseModel):
    """User object posted to /jwt; becomes the token payload."""
    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=1)


class FoodCreate(BaseModel):
    """Stored as sent: descriptive fields are untyped so nothing is coerced."""
    model_config = ConfigDict(extra="allow")

    food_name:     Any = None
    image:         Any = None
    category:      Any = None
    food_quantity: Any = None
    price:         Any = None
    country:       Any = None
    description:   Any = None
    purchaseCount: Any = 0


class FoodUpdate(BaseModel):
    """Replacement values; any field left out is written as null."""
    food_name:     Any = None
    image:         Any = None
    category:      Any = None
    food_quantity: Any = None
    price:         Any = None
    country:       Any = None
    description:   Any = None


class OrderCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    food_id:    str = Field(..., description="Hex id of the purchased food")
    user_email: Optional[str] = None


# ── Response Models ────────────────────────────────────────────────────────────

class SuccessResponse(BaseModel):
    success: bool = True


class InsertResult(BaseModel):
    acknowledged: bool
    insertedId:   str


class UpdateResult(BaseModel):
    acknowledged:  bool
    matchedCount:  int
    modifiedCount: int
    upsertedCount: int
    upsertedId:    Optional[str] = None


class DeleteResult(BaseModel):
    acknowledged: bool
    deletedCount: int


class HealthResponse(BaseModel):
    status:   str
    time:     str
    database: str


Document = dict[str, Any]
