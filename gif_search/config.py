from pydantic import field_validator
from pydantic_settings import BaseSettings

SNAPSHOTS = (1, 2, 3)


class Settings(BaseSettings):
    host: str = "localhost"
    port: int = 3000

    # Which stage of the app serves the routes (1, 2 or 3)
    snapshot: int = 3

    log_level: str = "INFO"

    @field_validator("snapshot")
    @classmethod
    def check_snapshot(cls, value: int) -> int:
        if value not in SNAPSHOTS:
            raise ValueError(f"snapshot must be one of {SNAPSHOTS}, got {value}")
        return value

    class Config:
        env_file = ".env"


settings = Settings()
