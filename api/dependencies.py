"""
FastAPI dependency injection.

How this works:
- An endpoint declares `config: Settings = Depends(get_settings)`
- FastAPI calls get_settings() before your endpoint runs
- Tests can swap it via app.dependency_overrides[get_settings]
"""

from config.settings import Settings, settings


def get_settings() -> Settings:
    """Returns the process-wide settings singleton."""
    return settings
