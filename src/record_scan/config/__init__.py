from .loader import ConfigError, load_config
from .models import AppConfig, DisplayConfig, LoggingConfig, SourceConfig

# Config exports are intentionally small.
__all__ = ["AppConfig", "ConfigError", "DisplayConfig", "LoggingConfig", "SourceConfig", "load_config"]
