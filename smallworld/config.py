from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "SmallWorld"
    debug: bool = False

    catalog_url: str = "https://db.ygoprodeck.com/api/v7/cardinfo.php"
    catalog_timeout: float = 30.0

    # Upper bound on in-flight catalog lookups for a single deck
    max_concurrent_lookups: int = 8

    # Keep reveal cards that bridge to nothing as empty groups in the output
    include_empty_groups: bool = True

    max_upload_bytes: int = 64 * 1024


settings = Settings()
