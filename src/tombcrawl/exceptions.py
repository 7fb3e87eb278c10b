class TombcrawlError(Exception):
    """Base exception for the tombcrawl package."""


class ConfigError(TombcrawlError, ValueError):
    """Raised when a DungeonConfig cannot produce a level (bad sizes, bounds)."""
