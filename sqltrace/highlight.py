import re

from sqltrace import colors

KEYWORDS = (
    "SELECT",
    "FROM",
    "WHERE",
    "JOIN",
    "INSERT",
    "INTO",
    "UPDATE",
    "SET",
    "DELETE",
    "CREATE",
    "DROP",
    "ALTER",
    "TABLE",
    "INDEX",
    "PRIMARY",
    "KEY",
    "FOREIGN",
    "REFERENCES",
    "NOT",
    "NULL",
    "DEFAULT",
    "UNIQUE",
    "AUTO_INCREMENT",
    "IF",
    "EXISTS",
    "ON",
    "DUPLICATE",
    "VALUES",
    "ORDER",
    "BY",
    "GROUP",
    "HAVING",
    "LIMIT",
    "OFFSET",
    "INNER",
    "LEFT",
    "RIGHT",
    "OUTER",
    "UNION",
    "CASE",
    "WHEN",
    "THEN",
    "ELSE",
    "END",
    "AS",
    "DISTINCT",
    "COUNT",
    "SUM",
    "AVG",
    "MAX",
    "MIN",
    "AND",
    "OR",
    "IN",
    "LIKE",
    "BETWEEN",
    "IS",
)

KEYWORD_PATTERN = re.compile(r"\b(" + "|".join(KEYWORDS) + r")\b", re.IGNORECASE | re.ASCII)
STRING_PATTERN = re.compile(r"('[^']*'|\"[^\"]*\")")
# escape sequences such as "\x1b[34m" end in a letter, so their digits never stand alone
NUMBER_PATTERN = re.compile(r"\b(\d+)\b", re.ASCII)


def highlight(statement: str) -> str:
    """
    Annotate a statement with ANSI colors: keywords, then string literals, then numbers.

    These are plain text rewrites and the order matters, each pass sees the escapes
    inserted by the previous ones. Malformed SQL is highlighted as far as the
    patterns reach and is never rejected.
    """
    highlighted = KEYWORD_PATTERN.sub(lambda match: f"{colors.BLUE}{match.group(0).upper()}{colors.RESET}", statement)
    highlighted = STRING_PATTERN.sub(rf"{colors.GREEN}\g<1>{colors.RESET}", highlighted)
    return NUMBER_PATTERN.sub(rf"{colors.CYAN}\g<1>{colors.RESET}", highlighted)
