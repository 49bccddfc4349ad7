"""Config settings – 12-factor env-based configuration."""
from redis_dataloader.config.settings.base import DataLoaderSettings, Settings
from redis_dataloader.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["DataLoaderSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
