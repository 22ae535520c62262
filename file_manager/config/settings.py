# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
import logging
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from .config_loader import find_config_file, read_config_file

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FileManagerConfig(BaseModel):
    """Main configuration for File Manager."""

    default_username: str = Field(
        default="Guest", description="Display name used when none is supplied at startup"
    )

    chunk_size: int = Field(
        default=64 * 1024, gt=0, description="Chunk size in bytes for streaming transfers"
    )

    compress_suffix: str = Field(
        default=".br", description="Suffix appended by compress and stripped by decompress"
    )

    brotli_quality: int = Field(default=11, ge=0, le=11, description="Brotli quality level")

    list_concurrency: int = Field(
        default=16, gt=0, description="Maximum concurrent metadata lookups during ls"
    )

    log_level: str = Field(
        default="WARNING", description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )

    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )

    log_output: str = Field(
        default="stderr", description="Log output: stdout, stderr, or file path"
    )

    model_config = {"extra": "forbid"}

    @field_validator("compress_suffix")
    @classmethod
    def _check_suffix(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2 or "/" in value:
            raise ValueError("compress_suffix must look like '.br'")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "FileManagerConfig":
        """Create configuration from dictionary."""
        return cls(**config)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()


class FileManagerConfigSingleton:
    """Global singleton for FileManagerConfig.

    Resolution chain for fm.conf:
      1. Explicit path passed to initialize()
      2. FILE_MANAGER_CONFIG_FILE environment variable
      3. ~/.file_manager/fm.conf
      4. Built-in defaults
    """

    _instance: Optional[FileManagerConfig] = None
    _lock: Lock = Lock()

    @classmethod
    def get_instance(cls) -> FileManagerConfig:
        """Get the global singleton instance, loading it on first use."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls._load(find_config_file())
        return cls._instance

    @classmethod
    def initialize(
        cls,
        config_dict: Optional[Dict[str, Any]] = None,
        config_path: Optional[str] = None,
    ) -> FileManagerConfig:
        """Initialize the global singleton.

        Args:
            config_dict: Direct config dictionary (highest priority).
            config_path: Explicit path to fm.conf file.

        Raises:
            FileNotFoundError: If an explicitly named config file does not exist.
            ValueError: If the file is not valid JSON or fails validation.
        """
        with cls._lock:
            if config_dict is not None:
                cls._instance = FileManagerConfig.from_dict(config_dict)
            else:
                cls._instance = cls._load(find_config_file(config_path))
        return cls._instance

    @classmethod
    def _load(cls, path: Optional[Path]) -> FileManagerConfig:
        if path is None:
            return FileManagerConfig()
        return FileManagerConfig.from_dict(read_config_file(path))

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (mainly for testing)."""
        with cls._lock:
            cls._instance = None


def get_config() -> FileManagerConfig:
    """Get the global FileManagerConfig instance."""
    return FileManagerConfigSingleton.get_instance()


def initialize_config(
    config_path: Optional[str] = None,
    config_dict: Optional[Dict[str, Any]] = None,
) -> FileManagerConfig:
    """Load the global config once at startup."""
    return FileManagerConfigSingleton.initialize(config_dict=config_dict, config_path=config_path)
