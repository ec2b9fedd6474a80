#!/usr/bin/env python3
"""
Configuration management for the OpenAPI mock generator.
Loads configuration from config.yaml or creates default if not exists.
"""
import copy
import os
import yaml

# Default configuration
DEFAULT_CONFIG = {
    'mocks': {
        'output_folder': 'mocks',
        'http_methods': ['get', 'post', 'put', 'patch', 'delete'],
        'max_digits': 4,
        'word_count': 4,
        'default_min_items': 1,
        'default_max_items': 5
    },
    'openapi_definitions_dir': 'openApiDefinitions'
}

CONFIG_FILE = 'config.yaml'

DEFINITION_EXTENSIONS = ('.yaml', '.yml', '.json')


def deep_merge(default, loaded):
    """Deep merge loaded config with defaults."""
    result = copy.deepcopy(default)
    for key, value in loaded.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(config_file=CONFIG_FILE):
    """Load configuration from config.yaml or create default."""
    if not os.path.exists(config_file):
        print(f"⚙️  Creating default configuration file: {config_file}")
        create_default_config(config_file)

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        print(f"⚠️  Error loading {config_file}: {e}")
        print("Using default configuration...")
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(config, dict):
        return copy.deepcopy(DEFAULT_CONFIG)

    # Merge with defaults to ensure all keys exist
    return deep_merge(DEFAULT_CONFIG, config)


def create_default_config(config_file=CONFIG_FILE):
    """Create default config.yaml file."""
    config_content = """# OpenAPI Mock Generator Configuration

mocks:
  output_folder: mocks
  # Operations visited under each path
  http_methods: [get, post, put, patch, delete]
  # Integers and numbers stay below 10^max_digits (schema minimum/maximum are ignored)
  max_digits: 4
  # Words per generated string
  word_count: 4
  # Array length bounds when minItems/maxItems are not declared
  default_min_items: 1
  default_max_items: 5

openapi_definitions_dir: openApiDefinitions
"""
    try:
        with open(config_file, 'w', encoding='utf-8') as f:
            f.write(config_content)
        print(f"✅ Created {config_file} with default values")
    except OSError as e:
        print(f"❌ Error creating {config_file}: {e}")


def get_config():
    """Get configuration dictionary."""
    return load_config()


def ensure_openapi_definitions_dir(config=None):
    """Ensure openapi_definitions_dir exists, create with example if it doesn't."""
    if config is None:
        config = load_config()
    openapi_dir = config.get('openapi_definitions_dir', 'openApiDefinitions')

    if not os.path.exists(openapi_dir):
        print(f"📁 Creating OpenAPI definitions directory: {openapi_dir}")
        os.makedirs(openapi_dir, exist_ok=True)

        # Create example file
        example_file = os.path.join(openapi_dir, 'example-api.yaml')
        example_content = """openapi: 3.0.1
info:
  title: Example API
  description: Example OpenAPI specification
  version: "1.0"
paths:
  /items:
    get:
      summary: List items
      operationId: listItems
      responses:
        '200':
          description: Success
          content:
            application/json:
              schema:
                type: array
                minItems: 1
                maxItems: 3
                items:
                  $ref: '#/components/schemas/Item'
components:
  schemas:
    Item:
      type: object
      properties:
        id:
          type: integer
          format: int64
        tag:
          type: string
          enum: [new, used]
        createdAt:
          type: string
          format: date-time
"""
        with open(example_file, 'w', encoding='utf-8') as f:
            f.write(example_content)

        print(f"   ✅ Created example file: {example_file}")
        print(f"   ℹ️  Add your OpenAPI YAML or JSON files to {openapi_dir} directory")

    return openapi_dir


def get_openapi_definition_files(config=None):
    """Get list of OpenAPI definition files to process from openapi_definitions_dir."""
    openapi_dir = ensure_openapi_definitions_dir(config)
    definition_files = []

    for filename in os.listdir(openapi_dir):
        if filename.endswith(DEFINITION_EXTENSIONS):
            file_path = os.path.join(openapi_dir, filename)
            # Use filename without extension as identifier
            name = os.path.splitext(filename)[0]
            definition_files.append((name, file_path))

    if not definition_files:
        print(f"⚠️  No OpenAPI definition files found in {openapi_dir}")

    return sorted(definition_files)
