"""
GraphQL schema for the Bookshelf API
"""
