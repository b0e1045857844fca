import warnings
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    COUNTRIES_URL: str = "https://restcountries.com/v2/all"
    SNAPSHOT_PATH: str = "data/countries.json"
    MONGODB_URI: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "countries_db"
    COLLECTION_NAME: str = "countries"
    HTTP_TIMEOUT: Optional[float] = None  # seconds; None waits indefinitely
    LOG_LEVEL: str = "INFO"
    API_KEY: str = "changeme"
    DOCS_ENABLED: bool = True

    model_config = {"env_file": ".env"}


settings = Settings()

if settings.API_KEY == "changeme":
    warnings.warn(
        "API_KEY is set to the default value 'changeme'. "
        "Set a strong API_KEY in your .env file before exposing the API.",
        stacklevel=1,
    )
