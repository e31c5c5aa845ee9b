import logging
import numbers
from dataclasses import dataclass
from typing import Any, Sequence

from sqltrace import colors
from sqltrace.util import to_json

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Serialized:
    text: str
    ok: bool


def default_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:  # pylint: disable=broad-except
        return object.__repr__(value)


def serialize(value: Any) -> Serialized:
    """
    Render a structured value as JSON, or fall back to its ``str()``.

    Circular structures and types the JSON encoder does not know come back with
    ``ok=False`` instead of raising.
    """
    try:
        return Serialized(text=to_json(value), ok=True)
    except Exception as exc:  # pylint: disable=broad-except
        logger.debug("Falling back to str() for unserializable %s: %s", type(value).__name__, exc)
        return Serialized(text=default_str(value), ok=False)


def render_typed(value: Any) -> str:
    if value is None:
        return f"{colors.DIM}null{colors.RESET}"
    if isinstance(value, str):
        return f'{colors.GREEN}"{value}"{colors.RESET}'
    # bool before numbers: True is an int too
    if isinstance(value, bool):
        return f"{colors.YELLOW}{'true' if value else 'false'}{colors.RESET}"
    if isinstance(value, numbers.Number):
        return f"{colors.CYAN}{value}{colors.RESET}"
    serialized = serialize(value)
    color = colors.MAGENTA if serialized.ok else colors.RED
    return f"{color}{serialized.text}{colors.RESET}"


def render_value(value: Any) -> str:
    try:
        return render_typed(value)
    except Exception as exc:  # pylint: disable=broad-except
        logger.debug("Falling back to str() for unrenderable %s: %s", type(value).__name__, exc)
        return f"{colors.RED}{default_str(value)}{colors.RESET}"


def render_params(params: Sequence[Any]) -> str:
    if not params:
        return ""
    rendered = [f"{colors.DIM}${index}:{colors.RESET} {render_value(value)}" for index, value in enumerate(params, 1)]
    return f"Parameters: {colors.RESET}{', '.join(rendered)}"
