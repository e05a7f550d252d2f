"""
Resource data - Local state of one record resource instance.
"""

from typing import Any, Dict, Optional, Tuple

from .schema import RECORD_SCHEMA, zero_value


class ResourceData:
    """Holds the id and field values of a single resource instance."""

    def __init__(
        self,
        attributes: Optional[Dict] = None,
        resource_id: str = "",
        schema: Dict[str, Dict] = RECORD_SCHEMA,
    ):
        self.schema = schema
        self._attributes: Dict[str, Any] = {}
        self._id = resource_id or ""
        for key, value in (attributes or {}).items():
            self.set(key, value)

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, resource_id: str):
        """Set the resource id; an empty id marks the resource as absent."""
        self._id = resource_id or ""

    def get(self, key: str) -> Any:
        """Return a field's value, falling back to its default or zero value."""
        field = self._field(key)
        value = self._attributes.get(key)
        if value is None:
            return field.get("default", zero_value(field))
        return value

    def get_ok(self, key: str) -> Tuple[Any, bool]:
        """Return a field's value and whether it is set to a non-zero value."""
        value = self.get(key)
        return value, value != zero_value(self._field(key))

    def set(self, key: str, value: Any):
        self._field(key)
        self._attributes[key] = value

    def to_dict(self) -> Dict[str, Any]:
        """Return every schema field with its effective value."""
        return {key: self.get(key) for key in self.schema}

    def _field(self, key: str) -> Dict:
        try:
            return self.schema[key]
        except KeyError:
            raise KeyError(f"Unknown field '{key}'") from None

    def __repr__(self):
        return f"ResourceData(id={self._id!r}, attributes={self._attributes!r})"
