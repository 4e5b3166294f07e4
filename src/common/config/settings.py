"""Application settings and environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    # Input file settings
    INVENTORY_CSV_PATH: str = os.getenv("INVENTORY_CSV_PATH", "sample.csv")
    CSV_DELIMITER: str = os.getenv("CSV_DELIMITER", ",")
    CSV_ENCODING: str = os.getenv("CSV_ENCODING", "utf-8")
    CSV_HAS_HEADER: bool = _env_flag("CSV_HAS_HEADER", "true")

    # Reject rows with unparsable expiration dates while reading
    VALIDATE_EXPIRATION_ON_INGEST: bool = _env_flag("VALIDATE_EXPIRATION_ON_INGEST", "true")

    # Used to resolve "today" for the expiration prompt
    TIMEZONE: str = os.getenv("TIMEZONE", "Europe/Vilnius")

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
