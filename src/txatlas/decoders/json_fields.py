from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from txatlas.core.errors import DecodeError


def load_json(raw: Union[bytes, str], parse_decimal: bool = False) -> Any:
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Response is not UTF-8: {e}") from e
    try:
        if parse_decimal:
            return json.loads(raw, parse_float=Decimal, parse_int=Decimal)
        return json.loads(raw)
    except ValueError as e:
        raise DecodeError(f"Invalid JSON: {e}") from e


def as_object(val: Any, what: str) -> Dict[str, Any]:
    if not isinstance(val, dict):
        raise DecodeError(f"{what} must be a JSON object, got {type(val).__name__}")
    return val


def as_list(val: Any, what: str) -> List[Any]:
    if val is None:
        return []
    if not isinstance(val, list):
        raise DecodeError(f"{what} must be a JSON array, got {type(val).__name__}")
    return val


def required_str(obj: Dict[str, Any], key: str) -> str:
    val = obj.get(key)
    if not isinstance(val, str) or not val:
        raise DecodeError(f"Missing required field {key!r}")
    return val


def opt_str(obj: Dict[str, Any], key: str, default: str = "") -> str:
    val = obj.get(key)
    if val is None:
        return default
    if not isinstance(val, str):
        raise DecodeError(f"Field {key!r} must be a string, got {type(val).__name__}")
    return val


def opt_int(obj: Dict[str, Any], key: str, default: int = 0) -> int:
    val = obj.get(key)
    if val is None:
        return default
    # bool is an int subclass; JSON true/false is never a valid count here
    if isinstance(val, bool):
        raise DecodeError(f"Field {key!r} must be an integer, got bool")
    if isinstance(val, int):
        return val
    if isinstance(val, Decimal) and val == val.to_integral_value():
        return int(val)
    raise DecodeError(f"Field {key!r} must be an integer, got {val!r}")


def opt_decimal(obj: Dict[str, Any], key: str, default: Optional[Decimal] = None) -> Decimal:
    val = obj.get(key)
    if val is None:
        return default if default is not None else Decimal("0")
    if isinstance(val, bool):
        raise DecodeError(f"Field {key!r} must be a number, got bool")
    if isinstance(val, (int, Decimal)):
        return Decimal(val)
    raise DecodeError(f"Field {key!r} must be a number, got {type(val).__name__}")
