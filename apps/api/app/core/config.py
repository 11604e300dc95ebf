from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    database_url: str
    jwt_secret_key: str = "your-secret-key-change-in-production"  # Default for development
    jwt_issuer: str = "employee-directory-api"
    jwt_audience: str = "employee-directory-web"
    access_token_expire_minutes: int = 60 * 8

    # Comma-separated list, e.g. "http://localhost:3000,https://directory.example.com"
    cors_origins: str = "http://localhost:3000"

    log_level: str = "INFO"
    seed_on_startup: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

settings = Settings()
