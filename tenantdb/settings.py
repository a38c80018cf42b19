from anystore.settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="tenantdb_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    uri: str = "db"
    """Directory holding the database files"""

    default_name: str = "db"
    """Database name used when none is given"""

