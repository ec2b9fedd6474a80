import json
import os
from datetime import date, datetime

import yaml

from generators import MockResult, ReferenceResolver, ResolutionState, ValueGenerator

DEFAULT_HTTP_METHODS = ['get', 'post', 'put', 'patch', 'delete']


class CustomJSONEncoder(json.JSONEncoder):
    """
    Custom JSON encoder to handle date, datetime and other special objects.
    """
    def default(self, obj):
        if isinstance(obj, (date, datetime)):
            return obj.isoformat()  # Convert to ISO 8601 string format
        return super().default(obj)


def load_openapi_definition(file_path):
    """Load the OpenAPI definition from a file (JSON or YAML)."""
    with open(file_path, 'r', encoding='utf-8') as file:
        if file_path.endswith('.json'):
            definition = json.load(file)
        elif file_path.endswith(('.yaml', '.yml')):
            definition = yaml.safe_load(file)
        else:
            raise ValueError("File must be in JSON or YAML format")

    if not isinstance(definition, dict):
        raise ValueError(f"{file_path} does not contain an OpenAPI document")
    return definition


def extract_components(openapi_definition):
    """Extract the components table from the OpenAPI definition."""
    components = openapi_definition.get('components')
    return components if isinstance(components, dict) else {}


def create_value_generator(components, mocks_config=None, random_source=None):
    """Build a ValueGenerator for one document using the 'mocks' config section."""
    mocks_config = mocks_config or {}
    return ValueGenerator(
        ReferenceResolver(components),
        random_source=random_source,
        max_digits=mocks_config.get('max_digits', 4),
        word_count=mocks_config.get('word_count', 4),
        default_min_items=mocks_config.get('default_min_items', 1),
        default_max_items=mocks_config.get('default_max_items', 5),
    )


def resolve_response(response, components):
    """Follow a '#/components/responses/<Name>' reference, if the response is one."""
    if not isinstance(response, dict):
        return None
    if '$ref' not in response:
        return response

    ref_name = str(response['$ref']).split('/')[-1]
    responses_comp = components.get('responses')
    if not isinstance(responses_comp, dict):
        return None
    resolved = responses_comp.get(ref_name)
    return resolved if isinstance(resolved, dict) else None


def generate_mocks_from_openapi(openapi_definition, generator, http_methods=None, state=None):
    """
    Walk every path/method/status/media type and generate one mock per schema.
    All schemas of the document share one ResolutionState, so a repeated
    $ref yields the same value everywhere in the document.
    """
    if http_methods is None:
        http_methods = DEFAULT_HTTP_METHODS
    if state is None:
        state = ResolutionState()

    mocks = []
    paths = openapi_definition.get('paths')
    if not isinstance(paths, dict):
        return mocks

    components = extract_components(openapi_definition)

    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue

        for method, operation in path_item.items():
            if method not in http_methods or not isinstance(operation, dict):
                continue

            responses = operation.get('responses')
            if not isinstance(responses, dict):
                continue

            for status_code, response in responses.items():
                response = resolve_response(response, components)
                if response is None:
                    continue

                content = response.get('content')
                if not isinstance(content, dict):
                    continue

                for media_type, media_type_data in content.items():
                    schema = None
                    if isinstance(media_type_data, dict):
                        schema = media_type_data.get('schema')

                    mocks.append(MockResult(
                        endpoint=str(path),
                        method=str(method),
                        status_code=str(status_code),
                        media_type=str(media_type),
                        value=generator.generate(schema, state),
                    ))

    return mocks


def build_mocks_response(openapi_file, config=None):
    """
    Produce the serializable envelope for one definition file:
    {"mocks": [...]} on success, {"error": "..."} if the document cannot be processed.
    """
    mocks_config = (config or {}).get('mocks', {})

    try:
        openapi_definition = load_openapi_definition(openapi_file)
    except (OSError, ValueError, yaml.YAMLError) as e:
        # json.JSONDecodeError is a ValueError
        return {'error': f"Could not generate mocks: {e}"}

    generator = create_value_generator(extract_components(openapi_definition), mocks_config)
    state = ResolutionState()
    mocks = generate_mocks_from_openapi(
        openapi_definition,
        generator,
        mocks_config.get('http_methods', DEFAULT_HTTP_METHODS),
        state,
    )

    for ref in sorted(state.unresolved):
        print(f"   ⚠️  Unresolved reference: {ref} (mocked as null)")

    payload = {'mocks': [mock.to_dict() for mock in mocks]}
    try:
        json.dumps(payload, cls=CustomJSONEncoder)
    except (TypeError, ValueError) as e:
        return {'error': f"Could not generate mocks: {e}"}
    return payload


def save_mocks_as_json(name, payload, output_dir):
    """Save the mocks envelope of a definition as a JSON file."""
    os.makedirs(output_dir, exist_ok=True)
    file_path = os.path.join(output_dir, f"{name}.json")
    # Serialize fully before touching the file so a failure never leaves it half-written
    content = json.dumps(payload, indent=4, cls=CustomJSONEncoder)
    with open(file_path, 'w', encoding='utf-8') as json_file:
        json_file.write(content)
    return file_path


def generate_all_mocks(config):
    """Generate mocks for every definition in the definitions directory."""
    from config import get_openapi_definition_files

    output_dir = config['mocks']['output_folder']
    definition_files = get_openapi_definition_files(config)

    summary = {'definitions': 0, 'mocks': 0, 'errors': 0}
    for name, file_path in definition_files:
        print(f"\n📋 Processing: {name} ({file_path})")
        payload = build_mocks_response(file_path, config)
        saved_file = save_mocks_as_json(name, payload, output_dir)

        summary['definitions'] += 1
        if 'error' in payload:
            summary['errors'] += 1
            print(f"   ❌ {payload['error']}")
        else:
            summary['mocks'] += len(payload['mocks'])
            print(f"   ✅ {len(payload['mocks'])} mocks saved to {saved_file}")

    return summary


if __name__ == '__main__':
    from config import get_config

    result = generate_all_mocks(get_config())
    print(f"\n✅ Generated {result['mocks']} mocks from {result['definitions']} definition(s)")
