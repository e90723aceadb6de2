from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Tuple

from ..core.exceptions import ValidationError


class FilterCriteria:
    """Named string constraints for a list fetch.

    Every field is optional; an empty or missing value means "no constraint"
    and is never sent to the church API.
    """

    def __init__(self, fields: Iterable[str], values: Optional[Mapping[str, str]] = None):
        self._fields: Tuple[str, ...] = tuple(fields)
        self._values: Dict[str, str] = {name: "" for name in self._fields}
        for name, value in (values or {}).items():
            self.set(name, value)

    @property
    def fields(self) -> Tuple[str, ...]:
        return self._fields

    def get(self, name: str) -> str:
        return self._values.get(name, "")

    def set(self, name: str, value: Optional[str]) -> None:
        if name not in self._values:
            raise ValidationError(f"Unknown filter: {name}")
        self._values[name] = value or ""

    def clear(self) -> None:
        for name in self._fields:
            self._values[name] = ""

    def is_empty(self) -> bool:
        return not any(self._values.values())

    def to_query_params(self) -> Dict[str, str]:
        return {name: value for name, value in self._values.items() if value}

    def copy(self) -> "FilterCriteria":
        return FilterCriteria(self._fields, self._values)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterCriteria):
            return NotImplemented
        return self._fields == other._fields and self._values == other._values

    def __repr__(self) -> str:
        return f"FilterCriteria({self.to_query_params()!r})"

    @classmethod
    def from_args(cls, fields: Iterable[str], args: Mapping[str, str]) -> "FilterCriteria":
        """Build criteria from a query string, ignoring parameters that are not filters."""
        fields = tuple(fields)
        return cls(fields, {name: args.get(name, "") for name in fields})
