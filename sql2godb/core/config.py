# sql2godb/core/config.py
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PACKAGE_NAME: str = Field("data", pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")
    DB_INTERFACE: str = Field("DB", pattern=r"^[A-Za-z_][A-Za-z0-9_.]*$")
    QUERY_TIMEOUT_SECONDS: int = Field(3, gt=0)
    LOG_LEVEL: str = "INFO"

    def with_overrides(self, **overrides) -> "Settings":
        """Copy with the non-None overrides applied and re-validated."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return Settings(**values)

    class Config:
        env_prefix = "SQL2GODB_"
        env_file = ".env"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
