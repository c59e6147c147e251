from __future__ import annotations
import re
from dataclasses import fields
from typing import Any, Callable, Dict, Sequence

from ..core.types import DayInfo

AttrFunc = Callable[[DayInfo], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

# lower_snake_case, so names work unquoted as CLI `--attr` values
_NAME_RE = re.compile(r"^[a-z][a-z0-9_]*$")
# attribute keys must not shadow the day's own fields
_RESERVED = frozenset(f.name for f in fields(DayInfo))


def register_attribute(name: str, fn: AttrFunc, *, replace: bool = False) -> None:
    if not _NAME_RE.match(name):
        raise ValueError(f"Invalid attribute name '{name}' (expected lower_snake_case)")
    if name in _RESERVED:
        raise ValueError(f"Attribute name '{name}' clashes with a DayInfo field")
    if name in _REGISTRY and not replace:
        raise ValueError(f"Attribute '{name}' is already registered")
    _REGISTRY[name] = fn


def available_attributes() -> list[str]:
    return sorted(_REGISTRY)


def compute_attributes(info: DayInfo, names: Sequence[str]) -> Dict[str, Any]:
    """Merge the outputs of the named attributes, in the order given."""
    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise KeyError(f"Unknown attribute '{name}'. Available: {sorted(_REGISTRY)}")
        values = _REGISTRY[name](info)
        clash = _RESERVED.intersection(values)
        if clash:
            raise ValueError(f"Attribute '{name}' returned reserved keys {sorted(clash)}")
        out.update(values)
    return out
