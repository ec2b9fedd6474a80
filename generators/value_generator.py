import copy
from datetime import date, datetime, timezone

from generators.models import SchemaNode, SchemaType
from generators.random_source import RandomSource

LOREM_IPSUM_WORDS = (
    'lorem ipsum dolor sit amet consectetur adipiscing elit '
    'sed in pharetra nisi auctor tempus'
).split()


def _plain_json(value):
    """Turn YAML-only scalars (dates, timestamps) into JSON-compatible values."""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, list):
        return [_plain_json(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _plain_json(item) for key, item in value.items()}
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


class ResolutionState:
    """
    Reference bookkeeping for one generation pass.
    Create one per document (or per top-level generate call), never share
    it between passes.
    """

    def __init__(self):
        self.in_progress = set()
        self.cache = {}
        self.unresolved = set()


class ValueGenerator:
    """
    Produces random mock values for OpenAPI schema nodes.

    Repeated references are memoized per ResolutionState: the first time a
    $ref is seen its target is generated and cached under the full ref
    string, later occurrences get a copy of that value. A reference met
    again while its own target is still being expanded yields None, which
    is what terminates cyclic component graphs.

    The cache is keyed by the full ref string while the in-progress set is
    keyed by the ref name (final segment), so two spellings of the same
    target, e.g. "#/components/schemas/Pet" and "#/definitions/Pet",
    are cached separately but still count as one cycle.

    Numeric values are bounded by max_digits to keep the output readable;
    schema minimum/maximum are not honoured.
    """

    def __init__(self, resolver, random_source=None, max_digits=4, word_count=4,
                 default_min_items=1, default_max_items=5):
        self.resolver = resolver
        self.random = random_source or RandomSource()
        self.max_number = 10 ** max_digits - 1
        self.word_count = word_count
        self.default_min_items = default_min_items
        self.default_max_items = default_max_items

    def generate(self, schema, state=None):
        """Generate one mock value. Accepts a SchemaNode or a raw mapping."""
        if state is None:
            state = ResolutionState()

        node = SchemaNode.from_dict(schema)
        if node is None:
            return None

        if node.ref is not None:
            return self._generate_reference(node.ref, state)

        if node.type is SchemaType.STRING:
            return self._generate_string(node)
        if node.type is SchemaType.INTEGER:
            if node.format == 'int64':
                return self.random.int64()
            return self.random.randint(1, self.max_number)
        if node.type is SchemaType.NUMBER:
            return self.random.uniform(1, self.max_number + 1)
        if node.type is SchemaType.BOOLEAN:
            return self.random.boolean()
        if node.type is SchemaType.ARRAY:
            return self._generate_array(node, state)
        if node.type is SchemaType.OBJECT:
            return self._generate_object(node, state)

        return None

    def _generate_reference(self, ref, state):
        if ref in state.cache:
            return copy.deepcopy(state.cache[ref])

        ref_name = self.resolver.ref_name(ref)
        if ref_name in state.in_progress:
            # Cycle: the target is still being built
            return None

        target = self.resolver.resolve(ref)
        if target is None:
            state.unresolved.add(ref)
            return None

        state.in_progress.add(ref_name)
        try:
            value = self.generate(target, state)
        finally:
            state.in_progress.discard(ref_name)

        state.cache[ref] = value
        return copy.deepcopy(value)

    def _generate_string(self, node):
        if node.enum:
            return _plain_json(self.random.choice(node.enum))
        if node.format == 'date-time':
            return self._generate_date_time()
        words = [self.random.choice(LOREM_IPSUM_WORDS) for _ in range(self.word_count)]
        return ' '.join(words)

    def _generate_date_time(self):
        current_year = datetime.now(timezone.utc).year
        moment = datetime(
            self.random.randint(2000, current_year),
            self.random.randint(1, 12),
            self.random.randint(1, 28),  # valid in every month
            self.random.randint(0, 23),
            self.random.randint(0, 59),
            self.random.randint(0, 59),
        )
        return moment.strftime('%Y-%m-%dT%H:%M:%SZ')

    def _generate_array(self, node, state):
        if node.items is None:
            return None

        min_items = node.min_items if node.min_items is not None else self.default_min_items
        max_items = node.max_items if node.max_items is not None else self.default_max_items
        min_items = max(min_items, 0)
        if max_items < min_items:
            return []

        count = self.random.randint(min_items, max_items)
        return [self.generate(node.items, state) for _ in range(count)]

    def _generate_object(self, node, state):
        result = {}
        for prop_name, prop_schema in (node.properties or {}).items():
            result[prop_name] = self.generate(prop_schema, state)
        return result
