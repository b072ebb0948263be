"""JSON Schema validation for pack payloads.

Sources return packs as plain JSON-like mappings. Before classification
they are checked against the bundled schema, and every violation is
reported by pack and asset position so a broken index can be fixed at
the source.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator, ValidationError

from .types import RawPack

SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "pack_index.schema.json"


@lru_cache(maxsize=1)
def pack_validator() -> Draft202012Validator:
    """Build the validator of the bundled pack schema, once.

    Raises:
        FileNotFoundError: If the schema is missing from the package
        jsonschema.SchemaError: If the schema itself is malformed
    """
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def describe_error(error: ValidationError) -> str:
    """Render a violation as "pack 'p', asset 3, field width: <message>"."""
    path = list(error.absolute_path)
    where = []
    if path:
        where.append(f"pack '{path[0]}'")
        rest = path[1:]
        if len(rest) >= 2 and rest[0] == "assets":
            where.append(f"asset {rest[1]}")
            rest = rest[2:]
        if rest:
            where.append("field " + ".".join(str(p) for p in rest))
    return f"{', '.join(where) or 'payload'}: {error.message}"


def validate_pack_index(packs: Mapping[str, RawPack]) -> None:
    """Validate packs against the schema.

    Raises:
        ValidationError: On the first violation found
    """
    pack_validator().validate(packs)


def pack_index_errors(packs: Mapping[str, RawPack]) -> list[str]:
    """Describe every schema violation of a pack payload; [] when valid."""
    return [describe_error(e) for e in pack_validator().iter_errors(packs)]
