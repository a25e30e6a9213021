"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings, configurable via environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    data_dir: Path = Path("data")

    # Logging
    log_level: LogLevel = "INFO"
    log_file_enabled: bool = False
    log_file_path: Path | None = None
    log_file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_file_backup_count: int = 5

    @property
    def resolved_log_file_path(self) -> Path:
        """Return log file path, defaulting to data_dir/dictscrape.log if not set."""
        return self.log_file_path or self.data_dir / "dictscrape.log"

    # Upstream pages
    oxford_base_url: str = "https://www.oxfordlearnersdictionaries.com"
    oxford_entry_path: str = "/definition/english/{entry}"
    wiktionary_url_template: str = "https://simple.wiktionary.org/wiki/{entry}"

    def dictionary_url(self, entry: str) -> str:
        return self.oxford_base_url + self.oxford_entry_path.format(entry=entry)

    def inflection_url(self, entry: str) -> str:
        return self.wiktionary_url_template.format(entry=entry)

    # HTTP client
    http_user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    http_timeout_seconds: float = 10.0

    # Cache
    cache_ttl_seconds: float = 30 * 60
    cache_max_entries: int = 1000
    dedupe_inflight: bool = True  # Share one upstream fetch between concurrent lookups

    # Server
    host: str = "0.0.0.0"  # noqa: S104  # nosec B104 - Development server
    port: int = 8000


settings = Settings()
