"""Application configuration"""

from typing import Set

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Backlog project
    # Raw project URL as the user typed it, e.g. "myspace.backlog.jp/projects/FOO".
    # Normalized to the /api/v2 form before use.
    backlog_url: str | None = None
    backlog_api_key: str | None = None
    # Query parameter carrying the API key on every request.
    api_key_param: str = "apiKey"
    request_timeout_seconds: float = 30.0

    # Comma-separated status labels that mean "closed". Matched exactly against
    # status.name, which Backlog renders in the space's display locale.
    #
    # Example: "完了,Closed"
    closed_status_labels: str = "完了"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False

    def closed_labels(self) -> Set[str]:
        """Parse closed_status_labels into a set of exact labels"""
        return {label.strip() for label in self.closed_status_labels.split(",") if label.strip()}


settings = Settings()
