"""Snowflake SQLAlchemy URL for schema migrations."""
from pulse.config import get_settings


def get_database_url() -> str:
    """Snowflake SQLAlchemy URL built from settings."""
    settings = get_settings()
    return (
        f"snowflake://{settings.snowflake_user}:{settings.snowflake_password}"
        f"@{settings.snowflake_account}/{settings.snowflake_database}/{settings.snowflake_schema}"
        f"?warehouse={settings.snowflake_warehouse}"
    )
