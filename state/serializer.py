# Convert game states and benchmark results to JSON (for logging or export)
import json
from enum import Enum
from pathlib import Path


def _default(obj):
    # Feedback / Outcome members serialize as their names
    if isinstance(obj, Enum):
        return obj.value
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(data_dict: dict) -> str:
    """
    Convert a dictionary to a JSON string.
    Args:
        data_dict (dict): The dictionary to convert.
    Returns:
        str: The JSON string representation of the dictionary.
    """
    return json.dumps(data_dict, indent=2, default=_default)


def from_json(json_string: str) -> dict:
    """
    Convert a JSON string back to a dictionary.
    Args:
        json_string (str): The JSON string to convert.
    Returns:
        dict: The resulting dictionary.
    """
    return json.loads(json_string)


def write_json(data_dict: dict, path: str):
    """
    Write a dictionary to disk as JSON.
    Args:
        data_dict (dict): The dictionary to save.
        path (str): The file path to write to.
    """
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(to_json(data_dict))
