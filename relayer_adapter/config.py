"""
Configuration management for Relayer Adapter

Loads settings from environment variables and .env file.
Includes logging configuration with optional file output.
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List

from dotenv import load_dotenv


def _load_env_file():
    """Load .env file from project root"""
    current = Path(__file__).parent.parent  # relayer_adapter package parent
    env_file = current / ".env"

    if env_file.exists():
        load_dotenv(env_file)


# Load .env on module import
_load_env_file()


def _get_env(key: str, default: Optional[str] = "") -> Optional[str]:
    """Get environment variable with default"""
    value = os.getenv(key)
    if value is None:
        return default
    return value


def _get_env_float(key: str, default: float) -> float:
    """Get environment variable as float"""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logging.getLogger(__name__).warning(
            f"Invalid float value for {key}='{value}', using default={default}"
        )
        return default


def _get_env_int(key: str, default: int) -> int:
    """Get environment variable as int"""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logging.getLogger(__name__).warning(
            f"Invalid int value for {key}='{value}', using default={default}"
        )
        return default


def _get_env_bool(key: str, default: bool) -> bool:
    """Get environment variable as bool"""
    value = os.getenv(key)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def _get_env_list(key: str, default: List[str]) -> List[str]:
    """Get comma-separated environment variable as list"""
    value = os.getenv(key)
    if value is None:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


# TomoX uses this address for the native coin in relayer token lists
DEFAULT_NATIVE_TOKEN_ADDRESS = "0x0000000000000000000000000000000000000001"


@dataclass
class ChainConfig:
    """Chain RPC and registry contract configuration"""
    rpc_url: str = field(default_factory=lambda: _get_env("RELAYER_RPC_URL", ""))
    # TomoChain mainnet
    chain_id: int = field(default_factory=lambda: _get_env_int("RELAYER_CHAIN_ID", 88))
    timeout_seconds: float = field(default_factory=lambda: _get_env_float("RELAYER_RPC_TIMEOUT", 30.0))
    relayer_registry_address: str = field(default_factory=lambda: _get_env("RELAYER_REGISTRY_ADDRESS", ""))
    lending_registry_address: str = field(default_factory=lambda: _get_env("LENDING_REGISTRY_ADDRESS", ""))


@dataclass
class NativeTokenConfig:
    """Native coin sentinel addresses and descriptor"""
    addresses: List[str] = field(
        default_factory=lambda: _get_env_list("NATIVE_TOKEN_ADDRESSES", [DEFAULT_NATIVE_TOKEN_ADDRESS])
    )
    symbol: str = field(default_factory=lambda: _get_env("NATIVE_TOKEN_SYMBOL", "TOMO"))
    decimals: int = 18


@dataclass
class AbiConfig:
    """ABI file overrides (empty means use the bundled ABI)"""
    relayer_abi_path: str = field(default_factory=lambda: _get_env("RELAYER_ABI_PATH", ""))
    lending_abi_path: str = field(default_factory=lambda: _get_env("LENDING_ABI_PATH", ""))
    token_abi_path: str = field(default_factory=lambda: _get_env("TOKEN_ABI_PATH", ""))


@dataclass
class LoggingConfig:
    """
    Logging configuration.

    Environment variables:
        LOG_FILE: Path to log file (default: no file output)
        LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
        LOG_FORMAT: Custom log format string
        LOG_CONSOLE: Enable console output (default: true)
        LOG_MAX_BYTES: Max log file size before rotation (default: 10MB)
        LOG_BACKUP_COUNT: Number of backup files to keep (default: 5)
    """
    log_file: str = field(default_factory=lambda: _get_env("LOG_FILE", ""))
    log_level: str = field(default_factory=lambda: _get_env("LOG_LEVEL", "INFO"))
    log_format: str = field(default_factory=lambda: _get_env(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ))
    console_output: bool = field(default_factory=lambda: _get_env_bool("LOG_CONSOLE", True))
    max_bytes: int = field(default_factory=lambda: _get_env_int("LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB
    backup_count: int = field(default_factory=lambda: _get_env_int("LOG_BACKUP_COUNT", 5))

    @property
    def level(self) -> int:
        """Get numeric log level"""
        return getattr(logging, self.log_level.upper(), logging.INFO)


@dataclass
class Config:
    """
    Main configuration container

    Loads all settings from environment variables and .env file.

    Usage:
        from relayer_adapter.config import config

        print(config.chain.rpc_url)
        print(config.native.symbol)
    """
    chain: ChainConfig = field(default_factory=ChainConfig)
    native: NativeTokenConfig = field(default_factory=NativeTokenConfig)
    abi: AbiConfig = field(default_factory=AbiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def reload(cls) -> "Config":
        """Reload configuration from environment"""
        _load_env_file()
        return cls()


# Global config instance
config = Config()


def get_config() -> Config:
    """Get global configuration instance"""
    return config


def reload_config() -> Config:
    """Reload and return new configuration"""
    global config
    config = Config.reload()
    return config


def setup_logging(
    log_config: Optional[LoggingConfig] = None,
    logger_name: str = "relayer_adapter",
) -> logging.Logger:
    """
    Set up logging based on configuration.

    Creates handlers for console and/or file output with rotation.
    The log file directory is created automatically if it doesn't exist.

    Args:
        log_config: Logging configuration (uses global config if None)
        logger_name: Name of the logger to configure (default: relayer_adapter)

    Returns:
        Configured logger instance
    """
    if log_config is None:
        log_config = config.logging

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_config.level)

    # Close before removing to release file handles on reload
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(log_config.log_format)

    handlers: List[logging.Handler] = []

    if log_config.log_file:
        from logging.handlers import RotatingFileHandler

        log_path = Path(log_config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_config.log_file,
            maxBytes=log_config.max_bytes,
            backupCount=log_config.backup_count,
            encoding='utf-8',
        )
        file_handler.setLevel(log_config.level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if log_config.console_output:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_config.level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    for handler in handlers:
        logger.addHandler(handler)

    if log_config.log_file:
        logger.info(f"Logging initialized: file={log_config.log_file}, level={log_config.log_level}")

    return logger
