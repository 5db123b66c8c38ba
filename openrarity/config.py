from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_prefix="OPENRARITY_", env_file=".env")

    app_name: str = "OpenRarity"
    debug: bool = False

    log_level: str = "INFO"

    # Absolute tolerance under which two adjacent scores share a rank
    rank_score_tolerance: float = 1e-9


settings = Settings()


# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
