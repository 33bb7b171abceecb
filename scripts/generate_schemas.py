"""Generate JSON schemas from Pydantic models and save to schemas/ directory."""

import json
from pathlib import Path

from apidiff.kernel.model import APIDescription


def generate_schemas():
    """Generate JSON schemas for all models."""
    schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(exist_ok=True)

    # by_alias so the schema documents the JSON field names (phetioTypeName, ...)
    api_schema = APIDescription.model_json_schema(by_alias=True)
    api_schema_path = schemas_dir / "phetio_api.schema.json"
    with open(api_schema_path, 'w', encoding='utf-8') as f:
        json.dump(api_schema, f, indent=2, ensure_ascii=False)
    print(f"Generated: {api_schema_path}")

    print("\nSchema generation complete!")


if __name__ == "__main__":
    generate_schemas()
