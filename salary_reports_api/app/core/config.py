"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts with the embedded sample records and no external
credentials.  In a production deployment you should override these via
environment variables or a dedicated configuration service.
"""

import os
from dataclasses import dataclass
from typing import List


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Salary Reports API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Which record source backs the report endpoints: ``literal`` (the
    # records embedded in ``services.sample_records``), ``json`` or
    # ``spreadsheet``.  The file based sources read ``data_path``.
    record_source: str = os.getenv("RECORD_SOURCE", "literal")
    data_path: str = os.getenv("DATA_PATH", "")

    # Comma‑separated list of origins allowed by the CORS middleware.
    cors_origins: str = os.getenv("CORS_ORIGINS", "http://localhost:5173")

    # External question‑answering endpoint used by ``POST /insights``.
    # The endpoint is disabled unless both the URL and the key are set.
    insights_url: str = os.getenv("INSIGHTS_URL", "")
    insights_api_key: str = os.getenv("INSIGHTS_API_KEY", "")
    insights_project: str = os.getenv("INSIGHTS_PROJECT", "")
    insights_timeout: float = float(os.getenv("INSIGHTS_TIMEOUT", "30"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at instantiation time, environment variables should
# be set before importing this module.
settings = Settings()
