"""
E-commerce Domain

Accounts, catalog, cart, wishlist, orders, reviews and text generation.
"""
