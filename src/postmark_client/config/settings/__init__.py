"""Config settings – 12-factor env-based configuration."""
from postmark_client.config.settings.base import Settings
from postmark_client.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from postmark_client.config.settings.postmark import DEFAULT_BASE_URL, PostmarkSettings

__all__ = [
    "DEFAULT_BASE_URL",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "PostmarkSettings",
    "Settings",
    "SettingsLoader",
]
