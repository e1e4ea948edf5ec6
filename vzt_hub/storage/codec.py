import json
from typing import Any

from ..errors import StorageFailure


def dumps(key: str, value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise StorageFailure(f"Value for '{key}' is not JSON serializable: {e}") from e


def loads(key: str, raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError as e:
        raise StorageFailure(f"Corrupt JSON stored under '{key}': {e}") from e
