from .order_pricing import PricedLine, generate_order_number, order_total

__all__ = ["PricedLine", "generate_order_number", "order_total"]
