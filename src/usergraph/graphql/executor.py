"""
Query execution against the GraphQL schema
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import strawberry
from fastapi import Request
from graphql import DocumentNode, GraphQLError, OperationDefinitionNode, get_operation_ast, parse
from pydantic import JsonValue

from ..logging import get_logger
from ..store import UserStore

logger = get_logger(__name__)


@dataclass
class QueryResult:
    """Outcome of one query: a data tree plus formatted errors."""

    data: dict[str, Any] | None = None
    errors: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the standard response shape, omitting empty errors."""
        payload: dict[str, Any] = {"data": self.data}
        if self.errors:
            payload["errors"] = self.errors
        return payload


class QueryExecutor:
    """Runs query text against a schema with the store injected into the context.

    The schema and store are built once at startup and shared read-only; every
    call builds its own context and result.
    """

    def __init__(self, schema: strawberry.Schema, store: UserStore) -> None:
        self.schema = schema
        self.store = store

    async def execute(
        self,
        query: str,
        variables: Mapping[str, JsonValue] | None = None,
        operation_name: str | None = None,
        request: Request | None = None,
    ) -> QueryResult:
        try:
            document = parse(query)
            select_operation(document, operation_name)
        except GraphQLError as e:
            result = QueryResult(data=None, errors=[e.formatted])
            self._report_errors(result, operation_name)
            return result

        execution = await self.schema.execute(
            query,
            variable_values=dict(variables or {}),
            context_value=self.build_context(request),
            operation_name=operation_name,
        )

        result = QueryResult(
            data=execution.data,
            errors=[e.formatted for e in execution.errors or []],
        )
        self._report_errors(result, operation_name)
        return result

    def build_context(self, request: Request | None = None) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "store": self.store,
        }

    def _report_errors(self, result: QueryResult, operation_name: str | None) -> None:
        if not result.errors:
            return
        logger.warning(
            "GraphQL execution returned errors",
            operation_name=operation_name,
            errors=[error.get("message") for error in result.errors],
            partial_data=result.data is not None,
        )


def select_operation(
    document: DocumentNode, operation_name: str | None
) -> OperationDefinitionNode:
    """Pick the operation to run from a parsed document.

    Raises:
        GraphQLError: If the document has no operation, an unknown
            ``operation_name`` is given, or several operations are present
            without a name to choose between them
    """
    operation = get_operation_ast(document, operation_name)
    if operation is not None:
        return operation

    if operation_name is not None:
        raise GraphQLError(f"Unknown operation named '{operation_name}'.")

    operations = [
        definition
        for definition in document.definitions
        if isinstance(definition, OperationDefinitionNode)
    ]
    if operations:
        raise GraphQLError("Must provide operation name if query contains multiple operations.")
    raise GraphQLError("Must provide an operation.")
