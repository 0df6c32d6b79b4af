"""Syntax and conformance checks for the supported JSON Schema subset."""

from typing import Any, List

from krishi.core.exceptions import SchemaError

SUPPORTED_TYPES = {"object", "array", "string", "number", "integer", "boolean", "null"}


def check_schema(schema: Any, path: str = "$") -> None:
    """
    Check that a value is a syntactically valid schema in the supported subset.

    Only the shape of the schema is checked, not its meaning. Keywords outside
    the subset (description, title, format, ...) are ignored.

    Args:
        schema: Candidate schema
        path: Location used in error messages

    Raises:
        SchemaError: If the schema is malformed
    """
    if not isinstance(schema, dict):
        raise SchemaError("schema must be an object", path)

    schema_type = schema.get("type")
    if schema_type is not None:
        types = schema_type if isinstance(schema_type, list) else [schema_type]
        if not types:
            raise SchemaError("'type' must not be empty", path)
        for t in types:
            if not isinstance(t, str) or t not in SUPPORTED_TYPES:
                raise SchemaError(f"unsupported type {t!r}", path)

    if "enum" in schema:
        enum = schema["enum"]
        if not isinstance(enum, list) or not enum:
            raise SchemaError("'enum' must be a non-empty array", path)

    if "properties" in schema:
        properties = schema["properties"]
        if not isinstance(properties, dict):
            raise SchemaError("'properties' must be an object", path)
        for name, sub in properties.items():
            check_schema(sub, f"{path}.properties.{name}")

    if "items" in schema:
        check_schema(schema["items"], f"{path}.items")

    if "required" in schema:
        required = schema["required"]
        if not isinstance(required, list) or not all(
            isinstance(r, str) for r in required
        ):
            raise SchemaError("'required' must be an array of strings", path)


def _json_equal(a: Any, b: Any) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(_json_equal(a[k], b[k]) for k in a)
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(_json_equal(x, y) for x, y in zip(a, b))
    return a == b


def _matches_type(value: Any, schema_type: str) -> bool:
    if schema_type == "object":
        return isinstance(value, dict)
    if schema_type == "array":
        return isinstance(value, list)
    if schema_type == "string":
        return isinstance(value, str)
    if schema_type == "boolean":
        return isinstance(value, bool)
    if schema_type == "null":
        return value is None
    # bool is a subclass of int; JSON keeps them apart
    if isinstance(value, bool):
        return False
    if schema_type == "integer":
        return isinstance(value, int) or (
            isinstance(value, float) and value.is_integer()
        )
    if schema_type == "number":
        return isinstance(value, (int, float))
    return False


def conforms(value: Any, schema: dict, path: str = "$") -> List[str]:
    """
    Collect every place where a value does not fit a (checked) schema.

    Args:
        value: Parsed JSON value
        schema: Schema already accepted by check_schema
        path: Location prefix for problem messages

    Returns:
        List of problems, empty when the value conforms
    """
    problems: List[str] = []

    schema_type = schema.get("type")
    if schema_type is not None:
        types = schema_type if isinstance(schema_type, list) else [schema_type]
        if not any(_matches_type(value, t) for t in types):
            problems.append(
                f"{path}: expected {'/'.join(types)}, got {type(value).__name__}"
            )
            return problems

    if "enum" in schema and not any(_json_equal(value, option) for option in schema["enum"]):
        problems.append(f"{path}: {value!r} is not one of {schema['enum']!r}")

    if isinstance(value, dict):
        for name in schema.get("required", []):
            if name not in value:
                problems.append(f"{path}: missing required property {name!r}")
        for name, sub in schema.get("properties", {}).items():
            if name in value:
                problems.extend(conforms(value[name], sub, f"{path}.{name}"))

    if isinstance(value, list) and "items" in schema:
        for i, item in enumerate(value):
            problems.extend(conforms(item, schema["items"], f"{path}[{i}]"))

    return problems
