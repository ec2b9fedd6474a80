"""
Typed views over the parsed OpenAPI tree used by the mock generators.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

MockValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]


class SchemaType(Enum):
    STRING = 'string'
    INTEGER = 'integer'
    NUMBER = 'number'
    BOOLEAN = 'boolean'
    ARRAY = 'array'
    OBJECT = 'object'

    @classmethod
    def parse(cls, value):
        """Return the matching member, or None for unknown/missing types."""
        try:
            return cls(value)
        except ValueError:
            return None


def _as_int(value):
    # YAML booleans are ints in Python, they are not valid bounds
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


@dataclass
class SchemaNode:
    type: Optional[SchemaType] = None
    ref: Optional[str] = None
    enum: Optional[List[Any]] = None
    format: Optional[str] = None
    items: Optional['SchemaNode'] = None
    properties: Optional[Dict[str, 'SchemaNode']] = None
    min_items: Optional[int] = None
    max_items: Optional[int] = None

    @classmethod
    def from_dict(cls, raw, converting=None):
        """
        Build a node from a generic mapping.
        Never raises: anything that is not a mapping yields None and
        unusable fields are dropped.

        YAML anchors can make a mapping contain itself; a mapping met again
        while it is still being converted becomes an empty node.
        """
        if isinstance(raw, SchemaNode):
            return raw
        if not isinstance(raw, dict):
            return None

        if converting is None:
            converting = set()
        if id(raw) in converting:
            return cls()

        converting.add(id(raw))
        try:
            ref = raw.get('$ref')
            enum = raw.get('enum')
            fmt = raw.get('format')

            properties = None
            raw_props = raw.get('properties')
            if isinstance(raw_props, dict):
                properties = {}
                for prop_name, prop_schema in raw_props.items():
                    # A broken property schema still gets its key, with a null value
                    properties[str(prop_name)] = cls.from_dict(prop_schema, converting) or cls()

            return cls(
                type=SchemaType.parse(raw.get('type')),
                ref=ref if isinstance(ref, str) else None,
                enum=list(enum) if isinstance(enum, list) else None,
                format=fmt if isinstance(fmt, str) else None,
                items=cls.from_dict(raw.get('items'), converting),
                properties=properties,
                min_items=_as_int(raw.get('minItems')),
                max_items=_as_int(raw.get('maxItems')),
            )
        finally:
            converting.discard(id(raw))


@dataclass(frozen=True)
class MockResult:
    endpoint: str
    method: str
    status_code: str
    media_type: str
    value: MockValue = None

    def to_dict(self):
        return {
            'endpoint': self.endpoint,
            'method': self.method,
            'statusCode': self.status_code,
            'mediaType': self.media_type,
            'value': self.value,
        }
