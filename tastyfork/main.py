"""
main.py – FastAPI app entry point (slim wire-up only).
Only connects routes, CORS and lifespan. No business logic here.
"""
import logging
import os
from contextlib import asynccontextmanager
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import auth, foods, orders, system
from .deps import get_settings, get_store
from .db.session import close_all

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        if await get_store().ping():
            logger.info("TastyFork server connected to the database")
        else:
            logger.warning("Database not reachable at startup; serving anyway")
    except Exception as e:
        logger.error(f"Startup check failed: {e}")
    yield
    close_all()
    logger.info("Shutdown.")


app = FastAPI(
    title="TastyFork API",
    description="Food marketplace backend: catalog, orders and cookie-based JWT auth.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(system.router)
app.include_router(auth.router)
app.include_router(foods.router)
app.include_router(orders.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("tastyfork.main:app", host="0.0.0.0", port=get_settings().port)
