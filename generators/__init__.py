from generators.models import MockResult, SchemaNode, SchemaType
from generators.random_source import RandomSource
from generators.reference_resolver import ReferenceResolver
from generators.value_generator import ResolutionState, ValueGenerator

__all__ = [
    'MockResult',
    'RandomSource',
    'ReferenceResolver',
    'ResolutionState',
    'SchemaNode',
    'SchemaType',
    'ValueGenerator',
]
