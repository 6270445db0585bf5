"""routes/system.py – GET /, GET /health"""
from datetime import datetime
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from ..deps import get_store
from ..models import HealthResponse

router = APIRouter(tags=["System"])

BANNER = "TastyFork server making a food"


@router.get("/", response_class=PlainTextResponse)
async def root():
    return BANNER


@router.get("/health", response_model=HealthResponse)
async def health():
    db_ok = await get_store().ping()
    return HealthResponse(
        status="ok",
        time=datetime.now().isoformat(),
        database="ok" if db_ok else "unavailable",
    )
