import os
from decouple import config, RepositoryEnv, Config

# Force UTF-8 reading of .env on Windows (default cp1252 breaks on Devanagari)
_env_path = os.path.join(os.getcwd(), ".env")
if os.path.exists(_env_path):
    _config = Config(RepositoryEnv(_env_path, encoding="utf-8"))
else:
    _config = config  # fallback to default AutoConfig

def cfg(key, **kwargs):
    """Read config value, preferring env vars over .env file."""
    env_val = os.environ.get(key)
    if env_val is not None:
        cast = kwargs.get("cast")
        return cast(env_val) if cast else env_val
    return _config(key, **kwargs)

class Settings:
    MONGODB_URL: str = cfg("MONGODB_URL", default="mongodb://localhost:27017")
    DATABASE_NAME: str = cfg("DATABASE_NAME", default="jewellery_calculator")
    CONFIG_DOCUMENT_ID: str = cfg("CONFIG_DOCUMENT_ID", default="calculator_config")
    ALLOWED_ORIGINS: str = cfg("ALLOWED_ORIGINS", default="http://localhost:8000")
    PURCHASE_RATE_MARGIN: float = cfg("PURCHASE_RATE_MARGIN", default=500.0, cast=float)
    LOG_LEVEL: str = cfg("LOG_LEVEL", default="INFO")

settings = Settings()
