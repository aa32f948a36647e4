from os import environ

from pydantic import BaseModel, ConfigDict


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    sentry_dsn: str = ""
    stage: str
    logger_level: str = "INFO"
    is_offline: bool = False
    lambda_endpoint: str | None = None
    sentry_flush_timeout: float = 2.0

    @property
    def debug(self) -> bool:
        return self.logger_level.upper() == "DEBUG"


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config. For tests only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        sentry_dsn=environ.get("SENTRY_DSN", ""),
        stage=environ.get("SERVERLESS_STAGE", "local"),
        logger_level=environ.get("LOGGER_LEVEL", "INFO"),
        # serverless-offline sets IS_OFFLINE to any non-empty value
        is_offline=bool(environ.get("IS_OFFLINE")),
        lambda_endpoint=environ.get("LAMBDA_ENDPOINT"),
        sentry_flush_timeout=float(environ.get("SENTRY_FLUSH_TIMEOUT", "2.0")),
    )
    return _cached_config
