"""Configuration management using Pydantic settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # front-end VITE_* keys share the same .env
    )

    # Application
    app_name: str = "DRRM Dashboard"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 9999
    cors_origins: list[str] = ["*"]

    # Database: hosted Postgres. NEON_DATABASE_URL wins over DATABASE_URL
    neon_database_url: str = ""
    database_url: str = ""

    # Where the page loader reaches the proxy (normally this same server)
    page_api_url: str = "http://localhost:9999"

    # Google Drive galleries
    google_drive_api_key: str = ""
    gallery_folders: dict[str, str] = {}  # view -> Drive folder id
    gallery_titles: dict[str, str] = {}   # optional title overrides

    # Interactive map
    map_center_lat: float = 13.1391
    map_center_lng: float = 123.7437
    map_zoom: int = 13
    map_width: int = 1024   # nominal pixel size used for fit-to-bounds
    map_height: int = 768
    upload_extensions: list[str] = [".kml"]
    upload_fit_policy: str = "first"  # "first", "each" or "none"

    @property
    def database_dsn(self) -> str:
        return self.neon_database_url or self.database_url


settings = Settings()
