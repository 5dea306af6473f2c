"""
E-commerce domain layer: value objects and pure domain services.
"""
