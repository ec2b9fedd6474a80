from generators import ReferenceResolver, SchemaNode, SchemaType


def test_resolves_component_schema(components):
    node = ReferenceResolver(components).resolve('#/components/schemas/Pet')
    assert isinstance(node, SchemaNode)
    assert node.type is SchemaType.OBJECT
    assert list(node.properties) == ['id', 'name', 'status']


def test_only_last_segment_is_used(components):
    resolver = ReferenceResolver(components)
    assert resolver.resolve('#/definitions/Pet') == resolver.resolve('#/components/schemas/Pet')
    assert resolver.resolve('Pet') is not None


def test_ref_name():
    assert ReferenceResolver.ref_name('#/components/schemas/Order') == 'Order'
    assert ReferenceResolver.ref_name('Order') == 'Order'


def test_missing_name_is_not_found(components):
    assert ReferenceResolver(components).resolve('#/components/schemas/Unknown') is None


def test_missing_components_or_schemas_is_not_found():
    assert ReferenceResolver(None).resolve('#/components/schemas/Pet') is None
    assert ReferenceResolver({}).resolve('#/components/schemas/Pet') is None
    assert ReferenceResolver({'schemas': None}).resolve('#/components/schemas/Pet') is None
    assert ReferenceResolver({'schemas': ['Pet']}).resolve('#/components/schemas/Pet') is None


def test_non_mapping_target_is_not_found():
    resolver = ReferenceResolver({'schemas': {'Pet': 'object'}})
    assert resolver.resolve('#/components/schemas/Pet') is None
