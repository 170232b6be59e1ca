"""Package settings.

Values come from ``RESTMETRICS_*`` environment variables or a local ``.env``
file. Import the module-level ``settings`` instance rather than building a
new ``Settings`` per call site.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for client instrumentation.

    Attributes:
        TIMER_NAME: Name of the timer recorded for every intercepted exchange.
        TIMER_DESCRIPTION: Human-readable description attached to the timer.
        HISTOGRAM_BUCKETS: Duration buckets (seconds) for the Prometheus histogram.
        PROMETHEUS_NAMESPACE: Optional prefix for Prometheus metric names.
        LOG_LEVEL: Level applied to loggers built by ``LoggerConfigurator``.
        LOCAL_DEVELOPMENT: Use the human-friendly log format instead of key=value lines.
    """

    TIMER_NAME: str = "http.client.requests"
    TIMER_DESCRIPTION: str = "Timer of RestClient operation"
    HISTOGRAM_BUCKETS: tuple[float, ...] = (
        0.005,
        0.01,
        0.025,
        0.05,
        0.1,
        0.25,
        0.5,
        1.0,
        2.5,
        5.0,
        10.0,
    )
    PROMETHEUS_NAMESPACE: str = ""
    LOG_LEVEL: str = "INFO"
    LOCAL_DEVELOPMENT: bool = False

    model_config = SettingsConfigDict(
        env_prefix="RESTMETRICS_",
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
