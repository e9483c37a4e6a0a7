"""Resolver package for the GraphQL schema.

Resolvers read from the dataset carried by the request context and
convert records into GraphQL types.
"""
