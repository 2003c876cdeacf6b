"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    database_url: str = "sqlite:///./roadready.db"
    auto_create_schema: bool = True  # create tables from ORM metadata on startup
    jwt_secret_key: str = "change-me"
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = ""  # empty disables issuer validation
    jwt_audience: str = ""  # empty disables audience validation
    cors_allow_origins: str = "*"  # comma separated
    expose_error_details: bool = True  # echo exception text in 500 responses

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )

    @property
    def cors_origins(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


settings = Settings()
