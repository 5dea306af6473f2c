"""
Application layer for the e-commerce domain: requests, ports and use cases.
"""
