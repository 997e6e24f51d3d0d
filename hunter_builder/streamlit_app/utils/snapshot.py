"""
Stats snapshot loading for the Streamlit page.
"""

import json
from typing import Any, Dict, IO, Union


def load_snapshot_json(source: Union[str, bytes, IO]) -> Dict[str, Any]:
    """
    Parse an uploaded stats snapshot.

    Args:
        source: JSON text, bytes or a readable file object

    Returns:
        The snapshot mapping, ready for StatsModel.from_dict

    Raises:
        ValueError: If the JSON is invalid or its top level isn't an object
    """
    if hasattr(source, 'read'):
        source = source.read()
    try:
        data = json.loads(source)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Invalid JSON: expected an object of stats, got {type(data).__name__}")
    return data
