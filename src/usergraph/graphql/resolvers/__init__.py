"""Resolver package for the GraphQL schema.

Resolver functions referenced by the GraphQL types and queries live in sibling
modules and read their data sources from the execution context.
"""
