"""
Persistence models.
"""
