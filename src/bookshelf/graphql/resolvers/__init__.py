"""Resolver package for GraphQL schema.

Resolvers read the book store from ``info.context["store"]``; the schema
types, queries and mutations import them lazily.
"""
