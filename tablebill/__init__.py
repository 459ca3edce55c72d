"""Restaurant billing: menu, table booking, orders, bills, order history and feedback."""

__version__ = "1.0.0"
__all__ = ["models", "restaurant", "cli"]