from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):  # type: ignore[misc]
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # Solr endpoint
    scheme: str = "http"
    host: str = "127.0.0.1"
    port: int = 8983
    path: str = "solr"
    query_handler: str = "/select"

    # Identifier override for installs that cannot rely on the program name
    metric: str | None = None

    # Logging goes to stderr; stdout is reserved for the plugin protocol
    log_level: str = "WARNING"
    log_json: bool = False

    @property
    def stats_url(self) -> str:
        """Absolute URL of the ``admin/stats.jsp`` page."""
        base_path = self.path.strip("/")
        prefix = f"/{base_path}" if base_path else ""
        return f"{self.scheme}://{self.host}:{self.port}{prefix}/admin/stats.jsp"

    def model_post_init(self, __context: Any) -> None:  # noqa: D401
        """Normalise settings after initialization."""
        if self.metric is not None and not self.metric.strip():
            self.metric = None


__all__ = ["Settings"]
