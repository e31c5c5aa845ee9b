import datetime as dt
import re
from typing import Any, cast

import rapidjson

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def now_in_utc() -> dt.datetime:
    return dt.datetime.now(tz=dt.timezone.utc)


def to_json(obj: Any) -> str:
    return cast(
        str,
        rapidjson.dumps(
            obj,
            datetime_mode=rapidjson.DM_ISO8601,
            mapping_mode=rapidjson.MM_COERCE_KEYS_TO_STRINGS,
            uuid_mode=rapidjson.UM_CANONICAL,
        ),
    )


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE.sub("", text)
