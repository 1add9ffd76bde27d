# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Configuration management for certmeta."""

import logging
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Settings(BaseSettings):
    """Settings loaded from CERTMETA_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CERTMETA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Output buffers allocated by the CLI (same default as a TLS record buffer)
    buffer_size: int = 16384

    # Distinguished name rendering
    dn_format: str = "rfc2253"

    # Logging
    log_level: str = "WARNING"


# Global settings instance
settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for command line use.

    Args:
        level: Log level name (default: settings.log_level)
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
