from generators.models import SchemaNode


class ReferenceResolver:
    """Maps '#/components/schemas/<Name>' pointers to component schema nodes."""

    def __init__(self, components):
        self.components = components

    @staticmethod
    def ref_name(ref):
        """Final path segment of a $ref, used as the lookup key."""
        return ref.split('/')[-1]

    def resolve(self, ref):
        """
        Return the SchemaNode the ref points at, or None when the component
        table, its 'schemas' section or the named entry is missing.
        Only the last segment is looked up, any prefix is accepted.
        """
        if not isinstance(self.components, dict):
            return None
        schemas = self.components.get('schemas')
        if not isinstance(schemas, dict):
            return None
        return SchemaNode.from_dict(schemas.get(self.ref_name(ref)))
