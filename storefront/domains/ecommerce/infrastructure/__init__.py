"""
Infrastructure layer for the e-commerce domain.
"""
