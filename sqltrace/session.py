import datetime as dt
import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional

from sqltrace.statement import StatementKind
from sqltrace.util import now_in_utc

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuerySession:
    number: int
    started_at: dt.datetime
    kind: StatementKind
    table: Optional[str]

    @property
    def id(self) -> str:
        return f"q{self.number}"


class SessionTracker:
    """
    Hands out query numbers and keeps short-lived bookkeeping about each query.

    Entries expire ``ttl`` after they are created and the map never holds more than
    ``capacity`` of them. Both limits are enforced on :meth:`begin`, there is no timer.
    """

    def __init__(self, ttl: dt.timedelta = dt.timedelta(seconds=5), capacity: int = 1000) -> None:
        self.ttl = ttl
        self.capacity = capacity
        self.count = 0
        self._sessions: "OrderedDict[str, QuerySession]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def begin(self, kind: StatementKind, table: Optional[str]) -> QuerySession:
        now = now_in_utc()
        with self._lock:
            self.count += 1
            session = QuerySession(number=self.count, started_at=now, kind=kind, table=table)
            self._evict_expired(now)
            self._sessions[session.id] = session
            while len(self._sessions) > self.capacity:
                evicted, _ = self._sessions.popitem(last=False)
                logger.debug("Evicted query session %s over capacity %d", evicted, self.capacity)
            return session

    def _evict_expired(self, now: dt.datetime) -> None:
        # insertion order is creation order, so the oldest entries are always first
        while self._sessions:
            session_id, session = next(iter(self._sessions.items()))
            if now - session.started_at < self.ttl:
                break
            del self._sessions[session_id]
            logger.debug("Expired query session %s", session_id)
