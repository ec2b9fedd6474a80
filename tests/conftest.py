import pytest

from generators import ReferenceResolver, ValueGenerator


class ScriptedRandom:
    """RandomSource stand-in that replays queued values, falling back to the lower bound."""

    def __init__(self, *values):
        self.values = list(values)

    def _next(self, default):
        return self.values.pop(0) if self.values else default

    def randint(self, low, high):
        value = self._next(low)
        assert low <= value <= high
        return value

    def uniform(self, low, high):
        return float(self._next(low))

    def choice(self, values):
        return values[self._next(0)]

    def boolean(self):
        return bool(self._next(False))

    def int64(self):
        return self._next(-2 ** 63)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def components():
    return {
        'schemas': {
            'Pet': {
                'type': 'object',
                'properties': {
                    'id': {'type': 'integer', 'format': 'int64'},
                    'name': {'type': 'string'},
                    'status': {'type': 'string', 'enum': ['available', 'sold']},
                },
            },
            'A': {'type': 'object', 'properties': {'b': {'$ref': '#/components/schemas/B'}}},
            'B': {'type': 'object', 'properties': {'a': {'$ref': '#/components/schemas/A'}}},
            'Self': {'type': 'array', 'items': {'$ref': '#/components/schemas/Self'}},
        },
        'responses': {
            'PetResponse': {
                'description': 'A pet',
                'content': {
                    'application/json': {'schema': {'$ref': '#/components/schemas/Pet'}},
                },
            },
        },
    }


@pytest.fixture
def generator(components):
    return ValueGenerator(ReferenceResolver(components))


@pytest.fixture
def items_document():
    return {
        'openapi': '3.0.1',
        'paths': {
            '/items': {
                'get': {
                    'responses': {
                        '200': {
                            'description': 'ok',
                            'content': {
                                'application/json': {
                                    'schema': {
                                        'type': 'object',
                                        'properties': {
                                            'id': {'type': 'integer'},
                                            'tag': {'type': 'string', 'enum': ['a', 'b']},
                                        },
                                    },
                                },
                            },
                        },
                    },
                },
            },
        },
    }
