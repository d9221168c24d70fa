from typing import Dict, Any, Sequence


def get_nested_value(data: Dict[str, Any], keys: Sequence[str]) -> Any:
    """Walks a list of keys into nested dicts; None as soon as one is missing."""
    current = data
    for key in keys:
        if isinstance(current, dict) and key in current:
            current = current[key]
        else:
            return None
    return current


def first_truthy(*values: Any) -> Any:
    """Returns the first truthy value, or None when every candidate is empty."""
    for value in values:
        if value:
            return value
    return None
