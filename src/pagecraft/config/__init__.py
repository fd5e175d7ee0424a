from .models import ConfigError, SiteConfig, ThemeConfig, load_config
from .settings import Settings, get_settings

__all__ = ["ConfigError", "SiteConfig", "ThemeConfig", "load_config", "Settings", "get_settings"]
