import datetime as dt
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Union

from sqlalchemy import event
from sqlalchemy.engine import Connection, Engine

from sqltrace import colors
from sqltrace.highlight import highlight
from sqltrace.params import render_params
from sqltrace.session import SessionTracker
from sqltrace.settings import Settings
from sqltrace.statement import classify, color_for, extract_table, icon_for
from sqltrace.util import strip_ansi

logger = logging.getLogger(__name__)

Sink = Callable[[str], Any]


def as_sequence(parameters: Any, executemany: bool = False) -> list[Any]:
    if parameters is None:
        return []
    if executemany:
        # one structured value per parameter set
        return list(parameters)
    if isinstance(parameters, Mapping):
        return list(parameters.values())
    if isinstance(parameters, (str, bytes)):
        return [parameters]
    return list(parameters)


@dataclass
class QueryLogger:
    log: Sink
    settings: Settings
    sessions: SessionTracker

    def __init__(self, log: Sink = print, settings: Optional[Settings] = None) -> None:
        self.log = log
        self.settings = settings if settings is not None else Settings()
        self.sessions = SessionTracker(ttl=self.settings.session_ttl_delta, capacity=self.settings.max_sessions)

    def listen(self, connection: Union[Engine, Connection]) -> None:
        event.listen(connection, "before_cursor_execute", self.before_cursor_execute)
        logger.debug("Tracing queries of %r", connection)

    def before_cursor_execute(  # pylint: disable=too-many-arguments,unused-argument
        self,
        conn: Connection,
        cursor: Any,
        statement: str,
        parameters: Any,
        context: Any,
        executemany: bool,
    ) -> None:
        self.log_query(statement, as_sequence(parameters, executemany))

    def log_query(self, statement: str, params: Optional[Sequence[Any]]) -> None:
        kind = classify(statement)
        table = extract_table(statement)
        session = self.sessions.begin(kind, table)
        timestamp = dt.datetime.now().strftime("%H:%M:%S")

        on_table = f" {colors.DIM}on{colors.RESET} {colors.YELLOW}{table}{colors.RESET}" if table else ""
        lines = [
            f"\n{colors.BRIGHT}{colors.CYAN}╭─ Database Query {colors.DIM}#{session.number}{colors.RESET}",
            f"{colors.GRAY}│  {colors.DIM}Time: {timestamp}{colors.RESET}",
            f"{colors.GRAY}│  {icon_for(kind)} {color_for(kind)}{colors.BRIGHT}{kind.value}{colors.RESET}{on_table}",
            f"{colors.GRAY}│  {colors.DIM}SQL:{colors.RESET} {highlight(statement)}",
        ]
        rendered_params = render_params(params or [])
        if rendered_params:
            lines.append(f"{colors.GRAY}│  ├─ {rendered_params}")
        lines.append(f"{colors.GRAY}╰─{colors.DIM}{'─' * self.settings.footer_width}{colors.RESET}")

        for line in lines:
            self.log(line if self.settings.color else strip_ansi(line))


def log_queries(
    *,
    of: Union[Engine, Connection],
    log: Sink = print,
    settings: Optional[Settings] = None,
) -> QueryLogger:
    query_logger = QueryLogger(log, settings=settings)
    query_logger.listen(of)
    return query_logger
