"""Utility functions."""
from .config_manager import AppConfig, ProviderConfig, LoggingConfig, ConfigManager, parse_dsn
from .logger import setup_logging, setup_logging_from_config
from .content_normalizer import ContentNormalizer, prepare_upload, normalize_download

__all__ = [
    "AppConfig", "ProviderConfig", "LoggingConfig", "ConfigManager", "parse_dsn",
    "setup_logging", "setup_logging_from_config",
    "ContentNormalizer", "prepare_upload", "normalize_download",
]
