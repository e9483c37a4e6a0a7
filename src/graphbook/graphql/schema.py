"""
Main GraphQL schema definition using Strawberry
"""

import strawberry
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.extensions import QueryDepthLimiter
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from ..config import settings
from ..logging import get_logger
from ..units import UnsupportedUnitError
from .context import GraphbookContext, build_context
from .queries.root import Query

logger = get_logger(__name__)


class SchemaValidationError(Exception):
    """Raised when the schema fails startup validation."""


class GraphbookSchema(strawberry.Schema):
    """Strawberry schema that reports execution errors through structlog."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        operation_name = execution_context.operation_name if execution_context else None
        for error in errors:
            original = error.original_error
            if isinstance(original, UnsupportedUnitError):
                logger.warning(
                    "Unsupported unit requested",
                    quantity=original.quantity,
                    unit=original.unit,
                    path=error.path,
                    operation=operation_name,
                )
            elif original is None:
                # Parse and validation errors carry no original exception
                logger.info(
                    "GraphQL request rejected",
                    error=error.message,
                    operation=operation_name,
                )
            else:
                logger.error(
                    "GraphQL resolver failed",
                    error=str(original),
                    path=error.path,
                    operation=operation_name,
                    exc_info=original,
                )


def create_schema(max_query_depth: int | None = None) -> GraphbookSchema:
    """Create the schema with the depth limit applied at validation time."""
    depth = max_query_depth if max_query_depth is not None else settings.max_query_depth
    return GraphbookSchema(
        query=Query,
        extensions=[lambda: QueryDepthLimiter(max_depth=depth)],
    )


schema = create_schema()


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Checks that every type reference resolves and that introspection
    succeeds, so the server fails fast instead of at the first request.

    Raises:
        SchemaValidationError: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise SchemaValidationError(
                f"GraphQL schema validation failed: {'; '.join(error_messages)}"
            )

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())

        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise SchemaValidationError(
                f"GraphQL introspection failed: {'; '.join(error_messages)}"
            )

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def print_schema_sdl() -> str:
    """Return the schema in GraphQL SDL form."""
    return schema.as_str()


def create_graphql_router() -> GraphQLRouter[GraphbookContext, None]:
    """Create a GraphQL router for FastAPI."""

    async def get_context() -> GraphbookContext:
        """Get the context for GraphQL resolvers."""
        return build_context()

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
