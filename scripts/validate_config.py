#!/usr/bin/env python3
"""Dataset configuration validation script."""

import json
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from synthdata.config.loader import DEFAULT_CONFIG_FILE, ConfigLoader
from synthdata.config.validation import ConfigValidator
from synthdata.engine import GenerationEngine
from synthdata.errors import ConfigError, InputError


def main():
    """Main validation function."""
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_CONFIG_FILE
    print(f"🔍 Validating dataset configuration {path}...")

    loader = ConfigLoader.create()

    try:
        document = loader.load_document(path)
    except ConfigError as e:
        print(f"❌ {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(document)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {json.dumps(error.value, default=str)})")
        sys.exit(1)

    # Build every generator without writing, which parses all dataset strings
    engine = GenerationEngine()
    all_valid = True
    file_defaults = document.get("defaults") or {}

    for index, entry in enumerate(document["datasets"]):
        print(f"\n📊 Checking {entry['name']} ({entry['dataset_type']})...")
        try:
            dataset = loader.build_dataset(entry, file_defaults)
            generator = engine.create_generator(dataset, index)
            print(f"✅ {dataset.name} is valid, output to {generator.output_dir}")
        except InputError as e:
            print(f"❌ {e}")
            all_valid = False

    if all_valid:
        print(f"\n🎉 All datasets are valid!")
        sys.exit(0)
    else:
        print(f"\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
