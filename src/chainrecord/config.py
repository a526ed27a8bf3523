"""
Runtime configuration for chainrecord.

The library itself is pure; configuration only controls how it logs. Values
can be overridden from the environment.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import ConfigurationError
from .logging import LogConfig, LogLevel, LogManager, get_logger, setup_logging

logger = get_logger(__name__)

LOG_FORMATS = ("json", "text")
LOG_HANDLERS = ("console", "memory")


def _parse_level(value: str) -> LogLevel:
    return LogLevel(value.strip().lower())


def _parse_format(value: str) -> str:
    value = value.strip().lower()
    if value not in LOG_FORMATS:
        raise ValueError(f"expected one of {', '.join(LOG_FORMATS)}")
    return value


def _parse_handlers(value: str) -> List[str]:
    handlers = [h.strip().lower() for h in value.split(",") if h.strip()]
    unknown = [h for h in handlers if h not in LOG_HANDLERS]
    if unknown or not handlers:
        raise ValueError(
            f"expected a comma separated subset of {', '.join(LOG_HANDLERS)}"
        )
    return handlers


@dataclass
class ChainRecordConfig:
    """chainrecord configuration."""

    log_level: LogLevel = LogLevel.INFO
    log_format: str = "json"
    log_handlers: List[str] = field(default_factory=lambda: ["console"])

    # Environment overrides
    environment_overrides: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate values and apply environment variable overrides."""
        if isinstance(self.log_level, str):
            try:
                self.log_level = _parse_level(self.log_level)
            except ValueError:
                raise ConfigurationError(
                    f"invalid log level {self.log_level!r}",
                    config_key="log_level",
                    config_value=self.log_level,
                ) from None
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"invalid log format {self.log_format!r}",
                config_key="log_format",
                config_value=self.log_format,
            )
        unknown = [h for h in self.log_handlers if h not in LOG_HANDLERS]
        if unknown or not self.log_handlers:
            raise ConfigurationError(
                f"invalid log handlers {self.log_handlers!r}",
                config_key="log_handlers",
                config_value=self.log_handlers,
            )
        self._apply_environment_overrides()

    def _apply_environment_overrides(self):
        """Apply environment variable overrides."""
        env_mappings = {
            "CHAINRECORD_LOG_LEVEL": ("log_level", _parse_level),
            "CHAINRECORD_LOG_FORMAT": ("log_format", _parse_format),
            "CHAINRECORD_LOG_HANDLERS": ("log_handlers", _parse_handlers),
        }

        for env_var, (attr_name, parse) in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value is None:
                continue
            try:
                value = parse(env_value)
            except ValueError as e:
                logger.warning(
                    "Ignoring invalid environment variable",
                    extra={"variable": env_var, "value": env_value, "error": str(e)},
                )
                continue
            setattr(self, attr_name, value)
            self.environment_overrides[env_var] = value

    def to_log_config(self) -> LogConfig:
        """Logging configuration derived from these settings."""
        return LogConfig(
            level=self.log_level,
            format_type=self.log_format,
            handlers=list(self.log_handlers),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "log_level": self.log_level.value,
            "log_format": self.log_format,
            "log_handlers": list(self.log_handlers),
            "environment_overrides": {
                k: v.value if isinstance(v, LogLevel) else v
                for k, v in self.environment_overrides.items()
            },
        }

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ChainRecordConfig":
        """Create configuration from dictionary."""
        return cls(
            log_level=config_dict.get("log_level", LogLevel.INFO.value),
            log_format=config_dict.get("log_format", "json"),
            log_handlers=list(config_dict.get("log_handlers", ["console"])),
        )


# Global configuration instance
_global_config: Optional[ChainRecordConfig] = None


def get_global_config() -> ChainRecordConfig:
    """Get the global configuration."""
    global _global_config
    if _global_config is None:
        _global_config = ChainRecordConfig()
    return _global_config


def configure(config: Optional[ChainRecordConfig] = None) -> LogManager:
    """Install ``config`` (or the environment defaults) and set up logging."""
    global _global_config
    _global_config = config or ChainRecordConfig()
    return setup_logging(_global_config.to_log_config())
