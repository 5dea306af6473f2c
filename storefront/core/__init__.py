"""
Core Module

Cross-cutting building blocks: domain exceptions, interfaces, logging and wiring.
"""
