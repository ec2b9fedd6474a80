import os
import shutil


def main():
    from config import get_config
    from generate_mocks import generate_all_mocks

    config = get_config()

    MOCKS_FOLDER = config['mocks']['output_folder']

    print(f"\n{'='*70}")
    print(f"  OpenAPI Mock Generator")
    print(f"{'='*70}")
    print(f"  Definitions directory: {config['openapi_definitions_dir']}")
    print(f"  HTTP methods: {', '.join(config['mocks']['http_methods'])}")
    print(f"{'='*70}\n")

    # Delete output folder if it exists
    if os.path.exists(MOCKS_FOLDER):
        print(f"🗑️  Deleting folder: {MOCKS_FOLDER}")
        shutil.rmtree(MOCKS_FOLDER)

    print(f"\n{'='*70}")
    print("🚀 Generating mock responses...")
    print(f"{'='*70}")
    summary = generate_all_mocks(config)

    if not summary['definitions']:
        print("❌ No OpenAPI definition files found!")
        print("   Please add OpenAPI YAML or JSON files to the definitions directory.")
        return 1

    print(f"\n{'='*70}")
    if summary['errors']:
        print(f"⚠️  Process complete with {summary['errors']} failed definition(s)")
    else:
        print("✅ Process complete!")
    print(f"{'='*70}")
    print(f"  📋 Definitions: {summary['definitions']}")
    print(f"  🧪 Mocks: {summary['mocks']}")
    print(f"  📁 Output: {MOCKS_FOLDER}")
    print(f"{'='*70}\n")
    return 1 if summary['errors'] else 0


if __name__ == "__main__":
    raise SystemExit(main())
