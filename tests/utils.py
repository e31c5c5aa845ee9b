from sqltrace.util import now_in_utc, strip_ansi

__all__ = ["count_queries", "find_line", "now_in_utc", "plain"]


def plain(lines: list[str]) -> list[str]:
    return [strip_ansi(line) for line in lines]


def find_line(lines: list[str], text: str) -> str:
    matching = [line for line in plain(lines) if text in line]
    assert matching, f"no line contains {text!r}"
    return matching[0]


def count_queries(lines: list[str]) -> int:
    return sum("Database Query #" in line for line in plain(lines))
