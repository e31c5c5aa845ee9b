from typing import Iterator

from pytest import fixture
from sqlalchemy import create_engine
from sqlalchemy.future import Engine
from sqlalchemy.pool import StaticPool

from sqltrace.query_logger import QueryLogger
from sqltrace.settings import Settings
from tests.models import Base
from tests.settings import Environment


@fixture(name="env", scope="session")
def _env() -> Environment:
    return Environment()


@fixture(name="settings", scope="function")
def _settings() -> Settings:
    return Settings()


@fixture(name="lines", scope="function")
def _lines() -> list[str]:
    return []


@fixture(name="query_logger", scope="function")
def _query_logger(lines: list[str], settings: Settings) -> QueryLogger:
    return QueryLogger(lines.append, settings=settings)


@fixture(name="engine", scope="function")
def _engine(env: Environment) -> Iterator[Engine]:
    # a single shared connection keeps the in-memory database alive across connects
    engine = create_engine(
        env.database_url,
        connect_args={"check_same_thread": False},
        future=True,
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine  # type: ignore[misc]
    engine.dispose()
