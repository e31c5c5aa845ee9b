import datetime as dt

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseEnvironment(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="SQLTRACE_", extra="ignore")


class Settings(BaseEnvironment):
    color: bool = True
    session_ttl: float = Field(default=5.0, gt=0)
    max_sessions: int = Field(default=1000, ge=1)
    footer_width: int = Field(default=50, ge=0)

    @property
    def session_ttl_delta(self) -> dt.timedelta:
        return dt.timedelta(seconds=self.session_ttl)
