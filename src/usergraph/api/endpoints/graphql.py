"""GraphQL HTTP endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field, JsonValue, ValidationError

from ...graphql.executor import QueryExecutor
from ...logging import get_logger

logger = get_logger(__name__)


class GraphQLRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str
    variables: dict[str, JsonValue] | None = None
    operation_name: str | None = Field(default=None, alias="operationName")


def decode_graphql_request(body: bytes) -> GraphQLRequest:
    """Decode a JSON request body.

    Raises:
        ValidationError: If the body is not JSON or lacks a string ``query``
    """
    return GraphQLRequest.model_validate_json(body)


def create_graphql_router(executor: QueryExecutor, path: str = "/graphql") -> APIRouter:
    """Create the router serving GraphQL queries over POST."""

    router = APIRouter()

    @router.post(path)
    async def graphql_endpoint(request: Request) -> Response:  # pyright: ignore [reportUnusedFunction]
        body = await request.body()
        try:
            payload = decode_graphql_request(body)
        except ValidationError as e:
            logger.warning("Rejected malformed GraphQL request body", error=str(e))
            return PlainTextResponse(str(e), status_code=400)

        result = await executor.execute(
            payload.query,
            variables=payload.variables,
            operation_name=payload.operation_name,
            request=request,
        )
        # Execution errors travel inside the result; the HTTP status stays 200
        return JSONResponse(result.to_dict())

    return router
