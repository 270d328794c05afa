from urllib.parse import quote_plus

from pydantic_settings import BaseSettings
from pymongo.errors import ConfigurationError

ATLAS_HOST = "cluster0.jfgylgi.mongodb.net"
ATLAS_OPTIONS = "retryWrites=true&w=majority"


class Settings(BaseSettings):
    PORT: int = 5000
    HOST: str = "0.0.0.0"
    LOG_LEVEL: str = "INFO"

    DB_USER: str | None = None
    DB_PASS: str | None = None

    # Full connection string, wins over DB_USER / DB_PASS (local mongod, CI)
    MONGO_URI: str | None = None

    class Config:
        env_file = ".env"

    @property
    def mongo_uri(self) -> str:
        if self.MONGO_URI:
            return self.MONGO_URI
        if not self.DB_USER or not self.DB_PASS:
            raise ConfigurationError("Set MONGO_URI or both DB_USER and DB_PASS")
        user = quote_plus(self.DB_USER)
        password = quote_plus(self.DB_PASS)
        return f"mongodb+srv://{user}:{password}@{ATLAS_HOST}/?{ATLAS_OPTIONS}"


settings = Settings()
