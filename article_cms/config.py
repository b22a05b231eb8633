from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Article CMS"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Database settings
    database_url: str = "sqlite+aiosqlite:///./articles.db"

    # Localization settings
    default_locale: str = "en"
    supported_languages: list[str] = ["en", "zh", "ja", "ko", "fr", "de", "es", "pt", "ru", "ar"]

    # Article listing settings
    article_page_size_min: int = 1
    article_page_size_max: int = 100
    article_batch_size: int = 10

    # Sitemap settings
    site_base_url: str = "http://localhost:3000"

    # Logging settings
    log_level: str = "INFO"
    log_json: bool = True

    # CORS settings
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
