"""
Integrations

Adapters for external services.
"""
