"""
Storefront

E-commerce catalog and ordering backend exposing a GraphQL API.
"""

__version__ = "0.1.0"
