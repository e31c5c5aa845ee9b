from sqltrace.query_logger import QueryLogger, log_queries
from sqltrace.settings import Settings
from sqltrace.statement import StatementKind

__all__ = ["QueryLogger", "Settings", "StatementKind", "log_queries"]
