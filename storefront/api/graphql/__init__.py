"""
GraphQL API
"""

from storefront.api.graphql.context import GraphQLContext, get_context
from storefront.api.graphql.schema import create_schema, schema

__all__ = ["GraphQLContext", "create_schema", "get_context", "schema"]
