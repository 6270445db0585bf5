"""
deps.py – Dependency wiring: singleton instances.
Created once when the process starts. Routes resolve them through the getters
at request time, so tests can patch the module-level names.
"""
from .core.settings import Settings
from .core.tokens import TokenService
from .db.session import get_client, get_database
from .db.store import MarketStore
from .handlers.auth_handler import AuthHandler
from .handlers.food_handler import FoodHandler
from .handlers.order_handler import OrderHandler

# ── Core singletons ────────────────────────────────────────────────────────────

_settings = Settings.from_env()
_client   = get_client(_settings.database_uri, _settings.server_selection_timeout_ms)
_store    = MarketStore(get_database(_client, _settings.db_name))
_tokens   = TokenService(_settings.token_secret)

# ── Handler singletons ─────────────────────────────────────────────────────────

_auth   = AuthHandler(_tokens, _settings)
_foods  = FoodHandler(_store)
_orders = OrderHandler(_store)


# ── Getters (used in routes) ───────────────────────────────────────────────────

def get_settings()       -> Settings:     return _settings
def get_store()          -> MarketStore:  return _store
def get_tokens()         -> TokenService: return _tokens
def get_auth_handler()   -> AuthHandler:  return _auth
def get_food_handler()   -> FoodHandler:  return _foods
def get_order_handler()  -> OrderHandler: return _orders
