"""
Main GraphQL schema definition using Strawberry
"""

import strawberry
from graphql import GraphQLSchema, get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema

from ..logging import get_logger
from .queries.root import Query

logger = get_logger(__name__)

# Declared shape of the schema, as printed type references.
EXPECTED_FIELD_TYPES: dict[tuple[str, str], str] = {
    ("Query", "user"): "User",
    ("User", "id"): "String",
    ("User", "name"): "String",
}
EXPECTED_ARGUMENT_TYPES: dict[tuple[str, str, str], str] = {
    ("Query", "user", "id"): "String",
}


class SchemaConstructionError(Exception):
    """Raised when the GraphQL schema cannot be built or is inconsistent."""


def build_schema(query: type = Query) -> strawberry.Schema:
    """Build and validate the process-wide GraphQL schema.

    Raises:
        SchemaConstructionError: If the schema is invalid or deviates from the
            declared User/Query shape
    """
    try:
        schema = strawberry.Schema(query=query)
    except Exception as e:
        logger.error("GraphQL schema construction failed", error=str(e))
        raise SchemaConstructionError(f"GraphQL schema construction failed: {e}") from e

    validate_schema(schema)
    return schema


def validate_schema(schema: strawberry.Schema) -> None:
    """Validate the GraphQL schema at startup.

    Catches unresolved type references and shape drift early so the server
    fails fast instead of answering every request with errors.

    Raises:
        SchemaConstructionError: If the schema is invalid
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise SchemaConstructionError(
                f"GraphQL schema validation failed: {'; '.join(error_messages)}"
            )

        # Introspection exercises every type reference in the schema
        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise SchemaConstructionError(
                f"GraphQL introspection failed: {'; '.join(error_messages)}"
            )

        check_declared_shape(graphql_schema)

        logger.info("GraphQL schema validation successful")

    except SchemaConstructionError as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def check_declared_shape(graphql_schema: GraphQLSchema) -> None:
    """Compare field and argument types against the declared schema shape."""
    problems: list[str] = []

    for (type_name, field_name), expected in EXPECTED_FIELD_TYPES.items():
        field = _get_field(graphql_schema, type_name, field_name)
        if field is None:
            problems.append(f"{type_name}.{field_name} is not defined")
        elif str(field.type) != expected:
            problems.append(f"{type_name}.{field_name} has type {field.type}, expected {expected}")

    for (type_name, field_name, arg_name), expected in EXPECTED_ARGUMENT_TYPES.items():
        field = _get_field(graphql_schema, type_name, field_name)
        if field is None:
            continue
        arg = field.args.get(arg_name)
        if arg is None:
            problems.append(f"{type_name}.{field_name}({arg_name}:) is not defined")
        elif str(arg.type) != expected:
            problems.append(
                f"{type_name}.{field_name}({arg_name}:) has type {arg.type}, expected {expected}"
            )

    if problems:
        raise SchemaConstructionError(f"GraphQL schema shape mismatch: {'; '.join(problems)}")


def _get_field(graphql_schema: GraphQLSchema, type_name: str, field_name: str):
    if type_name == "Query":
        graphql_type = graphql_schema.query_type
    else:
        graphql_type = graphql_schema.get_type(type_name)
    fields = getattr(graphql_type, "fields", None)
    if not fields:
        return None
    return fields.get(field_name)


def print_schema(schema: strawberry.Schema) -> str:
    """Render the schema as SDL."""
    return schema.as_str()
