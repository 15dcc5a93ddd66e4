# solar_system/config.py
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import os

from dotenv import load_dotenv

from .catalog.store import DATA_FILE

# Load .env once on import
load_dotenv()

DEFAULT_REGION = "us-east-1"
DEFAULT_PORT = 3000


@dataclass
class Settings:
    aws_region: str = DEFAULT_REGION
    app_env: str = "development"
    table_name: str = "solar-system-planets-development"
    # DynamoDB Local or another compatible endpoint; None means AWS.
    dynamodb_endpoint_url: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    store_backend: str = "dynamodb"
    planets_data_file: Path = DATA_FILE
    log_level: str = "INFO"


def _load_port() -> int:
    raw = os.getenv("PORT", "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_PORT


def get_settings() -> Settings:
    """
    Build settings from the environment:
    - AWS_REGION, DYNAMODB_TABLE, DYNAMODB_ENDPOINT_URL for the store
    - APP_ENV, which suffixes the default table name
    - HOST / PORT for the server
    - STORE_BACKEND ("dynamodb" or "memory") and PLANETS_DATA_FILE
    - LOG_LEVEL
    """
    app_env = os.getenv("APP_ENV", "").strip() or "development"
    table_name = os.getenv("DYNAMODB_TABLE", "").strip() or f"solar-system-planets-{app_env}"
    data_file = os.getenv("PLANETS_DATA_FILE", "").strip()

    return Settings(
        aws_region=os.getenv("AWS_REGION", "").strip() or DEFAULT_REGION,
        app_env=app_env,
        table_name=table_name,
        dynamodb_endpoint_url=os.getenv("DYNAMODB_ENDPOINT_URL", "").strip() or None,
        host=os.getenv("HOST", "").strip() or "0.0.0.0",
        port=_load_port(),
        store_backend=(os.getenv("STORE_BACKEND", "").strip() or "dynamodb").lower(),
        planets_data_file=Path(data_file) if data_file else DATA_FILE,
        log_level=(os.getenv("LOG_LEVEL", "").strip() or "INFO").upper(),
    )
