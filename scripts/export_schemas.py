"""
Export JSON schemas for the Blueprint and BlueprintBook documents.

Schemas use wire names (neighbours, type, "1"/"2") so they describe the
decompressed JSON payload of an exchange string.

Usage:
    python scripts/export_schemas.py [--out-dir schemas]
"""
import argparse
import json
from pathlib import Path

from factorio_bp.domain import Blueprint, BlueprintBook
from factorio_bp.io import write_text_atomic

DOCUMENT_SCHEMAS = {
    "blueprint_schema.json": Blueprint,
    "blueprint_book_schema.json": BlueprintBook,
}


def export_schemas(out_dir: Path) -> list[Path]:
    """Export the document models as JSON schemas into out_dir."""
    written = []

    for filename, model in DOCUMENT_SCHEMAS.items():
        output_path = out_dir / filename
        schema = model.model_json_schema(by_alias=True, mode="serialization")

        write_text_atomic(str(output_path), json.dumps(schema, indent=2, ensure_ascii=False) + "\n")
        written.append(output_path)

        print(f"✓ Exported {filename} to {output_path}")

    return written


def main():
    parser = argparse.ArgumentParser(description="Export blueprint JSON schemas")
    parser.add_argument(
        "--out-dir",
        default=str(Path(__file__).parent.parent / "schemas"),
        help="Directory for the schema files (default: ./schemas)"
    )
    args = parser.parse_args()

    out_dir = Path(args.out_dir)
    export_schemas(out_dir)
    print(f"\nAll schemas exported to {out_dir}")


if __name__ == "__main__":
    main()
