"""
API layer: HTTP middleware and the GraphQL schema.
"""
