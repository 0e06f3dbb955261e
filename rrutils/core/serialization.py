import json
from typing import Any, Optional


def _decycle(value: Any, path: str, seen: dict) -> Any:
    if isinstance(value, (dict, list, tuple)):
        if id(value) in seen:
            return f"[Circular ~{seen[id(value)]}]"
        seen[id(value)] = path
        try:
            if isinstance(value, dict):
                return {str(k): _decycle(v, f"{path}.{k}", seen) for k, v in value.items()}
            return [_decycle(v, f"{path}.{i}", seen) for i, v in enumerate(value)]
        finally:
            del seen[id(value)]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def stringify(obj: Any, indent: Optional[int] = None) -> str:
    """Serialize ``obj`` to JSON without failing on cycles or unknown types.

    Circular references become ``"[Circular ~.path]"`` and anything JSON
    cannot encode is replaced by its ``str()``.
    """
    return json.dumps(_decycle(obj, '', {}), indent=indent)


def safe_json_to_object(arg: Any) -> Any:
    """Return a fresh object from a JSON string or from any object."""
    if not isinstance(arg, str):
        arg = stringify(arg)
    return json.loads(arg)
