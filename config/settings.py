from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # App
    APP_NAME: str = "Snowflake ID Service"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Worker identity; ranges are checked by IdWorkerBuilder.build()
    SNOWFLAKE_WORKER_ID: int = 0
    SNOWFLAKE_DATACENTER_ID: int = 0
    SNOWFLAKE_EPOCH: int = 1288834974657
    SNOWFLAKE_SEQUENCE: int = 0

    # Upper bound for GET /ids?count=N
    SNOWFLAKE_MAX_BATCH: int = 1000


settings = Settings()
