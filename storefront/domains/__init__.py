"""
Bounded contexts.
"""
