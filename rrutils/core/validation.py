from collections.abc import Mapping
from typing import Any, Union

from fastapi import Request


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def is_non_empty_object(value: Any) -> bool:
    return isinstance(value, dict) and len(value) > 0


def is_non_empty_array(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and len(value) > 0


def is_even(n: int) -> bool:
    return n % 2 == 0


def event_is_verbose(event: Union[Request, Mapping, None]) -> bool:
    """True when the request asks for verbose output via a ``verbose`` query parameter.

    Accepts either a FastAPI request or a Lambda proxy event, where the
    parameters live under ``queryStringParameters`` (``None`` when absent).
    """
    if isinstance(event, Request):
        return 'verbose' in event.query_params
    if not isinstance(event, Mapping):
        return False
    params = event.get('queryStringParameters') or {}
    return isinstance(params, Mapping) and isinstance(params.get('verbose'), str)
