"""
core/settings.py – Settings dataclass, read once from the environment.

load_dotenv() runs in main.py before this is imported, so a local .env works.
"""
import os
from dataclasses import dataclass, field
from urllib.parse import quote_plus

DEFAULT_ORIGINS = (
    "http://localhost:5173",
    "https://tastyfork.web.app",
    "https://tastyfork.firebaseapp.com",
)

LOCAL_URI = "mongodb://localhost:27017"


def _split_origins(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_ORIGINS
    return tuple(o.strip() for o in raw.split(",") if o.strip())


@dataclass(frozen=True)
class Settings:
    db_user:      str = ""
    db_pass:      str = ""
    db_host:      str = "cluster0.0goom.mongodb.net"
    db_name:      str = "tastyForkDB"
    mongodb_uri:  str | None = None
    token_secret: str = ""
    port:         int = 5000
    environment:  str = "development"
    log_level:    str = "INFO"
    cors_origins: tuple[str, ...] = field(default=DEFAULT_ORIGINS)
    server_selection_timeout_ms: int = 5000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            db_user=os.getenv("DB_USER", ""),
            db_pass=os.getenv("DB_PASS", ""),
            db_host=os.getenv("DB_HOST", "cluster0.0goom.mongodb.net"),
            db_name=os.getenv("DB_NAME", "tastyForkDB"),
            mongodb_uri=os.getenv("MONGODB_URI") or None,
            token_secret=os.getenv("ACCESS_TOKEN_SECRET", ""),
            port=int(os.getenv("PORT", "5000")),
            environment=os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "development",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS")),
            server_selection_timeout_ms=int(os.getenv("MONGO_TIMEOUT_MS", "5000")),
        )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def database_uri(self) -> str:
        """Explicit MONGODB_URI wins; otherwise build the Atlas SRV URI.
        Without credentials, fall back to a local mongod."""
        if self.mongodb_uri:
            return self.mongodb_uri
        if not self.db_user:
            return LOCAL_URI
        user = quote_plus(self.db_user)
        pwd  = quote_plus(self.db_pass)
        return (
            f"mongodb+srv://{user}:{pwd}@{self.db_host}/"
            "?retryWrites=true&w=majority&appName=Cluster0"
        )
