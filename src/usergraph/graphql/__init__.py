"""GraphQL schema, resolvers and execution for the user service."""
