import re
import json
from typing import Any, Dict, Iterable, List

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")

def strip_code_fences(text: str) -> str:
    return _FENCE.sub("", (text or "").strip()).strip()

def parse_json_object(text: str) -> Dict[str, Any]:
    """Parse a model reply into a dict. Raises ValueError if it is not a JSON object."""
    value = json.loads(strip_code_fences(text))
    if not isinstance(value, dict):
        raise ValueError(f"expected a JSON object, got {type(value).__name__}")
    return value

def unique(items: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(items))
