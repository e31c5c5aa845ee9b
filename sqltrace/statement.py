import enum
import re
from typing import NamedTuple, Optional

from sqltrace import colors


class StatementKind(str, enum.Enum):
    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    CREATE = "CREATE"
    DROP = "DROP"
    ALTER = "ALTER"
    OTHER = "OTHER"


class Presentation(NamedTuple):
    icon: str
    color: str


# checked in declaration order, first leading match wins
LEADING_KINDS = tuple(kind for kind in StatementKind if kind is not StatementKind.OTHER)

TABLE_PATTERNS = (
    re.compile(r"(?:FROM|INTO|UPDATE|JOIN)\s+[\"`]?(\w+)[\"`]?", re.IGNORECASE),
    re.compile(r"(?:CREATE|DROP)\s+TABLE\s+[\"`]?(\w+)[\"`]?", re.IGNORECASE),
)

PRESENTATION = {
    StatementKind.SELECT: Presentation(icon="🔍", color=colors.GREEN),
    StatementKind.INSERT: Presentation(icon="📝", color=colors.BLUE),
    StatementKind.UPDATE: Presentation(icon="✏️", color=colors.YELLOW),
    StatementKind.DELETE: Presentation(icon="🗑️", color=colors.RED),
    StatementKind.CREATE: Presentation(icon="🏗️", color=colors.MAGENTA),
    StatementKind.DROP: Presentation(icon="💥", color=colors.RED),
    StatementKind.ALTER: Presentation(icon="🔧", color=colors.CYAN),
}
DEFAULT_PRESENTATION = Presentation(icon="⚡", color=colors.WHITE)


def classify(statement: str) -> StatementKind:
    upper = statement.strip().upper()
    for kind in LEADING_KINDS:
        if upper.startswith(kind.value):
            return kind
    return StatementKind.OTHER


def extract_table(statement: str) -> Optional[str]:
    """
    Best-effort lookup of the first table a statement references.

    Only the first occurrence is reported, so a join surfaces its leftmost table.
    Identifiers quoted with backticks or double quotes come back unquoted.
    """
    for pattern in TABLE_PATTERNS:
        match = pattern.search(statement)
        if match:
            return match.group(1)
    return None


def icon_for(kind: StatementKind) -> str:
    return PRESENTATION.get(kind, DEFAULT_PRESENTATION).icon


def color_for(kind: StatementKind) -> str:
    return PRESENTATION.get(kind, DEFAULT_PRESENTATION).color
