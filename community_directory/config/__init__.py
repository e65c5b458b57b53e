from community_directory.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
