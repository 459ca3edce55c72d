"""Menu items, order lines and orders, with bill and record formatting."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class MenuItem:
    """A dish on the menu."""

    id: int
    name: str
    price: float


@dataclass
class OrderItem:
    """A menu item ordered in some quantity."""

    item: MenuItem
    quantity: int

    def total(self) -> float:
        """Price of this line: quantity times unit price."""
        return self.quantity * self.item.price


def format_timestamp(moment: datetime) -> str:
    """Render a moment the way the classic ``ctime`` does, without a newline."""
    return moment.ctime()


@dataclass
class Order:
    """A customer's order at a table."""

    order_id: int
    customer_name: str
    table_number: int
    items: list[OrderItem] = field(default_factory=list)
    order_time: datetime = field(default_factory=datetime.now)

    def add_item(self, item: OrderItem) -> None:
        """Append an order line."""
        self.items.append(item)

    def total_bill(self) -> float:
        """Sum of all order lines."""
        return sum((line.total() for line in self.items), 0.0)

    def format_bill(self) -> str:
        """The printed bill for this order."""
        lines = [
            "",
            "-------- BILL --------",
            f"Order ID: {self.order_id}",
            f"Customer: {self.customer_name}",
            f"Table: {self.table_number}",
            f"Date/Time: {format_timestamp(self.order_time)}",
            "----------------------",
        ]
        lines.extend(
            f"{line.item.name:<20} x{line.quantity} = Rs. {line.total():.2f}"
            for line in self.items
        )
        lines.append("----------------------")
        lines.append(f"Total: Rs. {self.total_bill():.2f}")
        lines.append("----------------------")
        return "\n".join(lines) + "\n"

    def record_line(self) -> str:
        """The record appended to the order history file for this order."""
        header = (
            f"{self.order_id}|{self.customer_name}|{self.table_number}|"
            f"{format_timestamp(self.order_time)}\n"
        )
        body = "".join(
            f"{line.item.id},{line.item.name},{line.quantity},{line.total():g};"
            for line in self.items
        )
        return header + body + "\n"


def default_menu() -> list[MenuItem]:
    """The restaurant's standard menu."""
    dishes = [
        ("Masala Dosa", 40.0),
        ("Idli Vada", 30.0),
        ("Paneer Butter Masala", 90.0),
        ("Chapati", 10.0),
        ("Fried Rice", 80.0),
        ("Ice Cream", 50.0),
        ("Coffee", 25.0),
        ("Pizza", 150.0),
        ("Burger", 120.0),
        ("Noodles", 90.0),
        ("Gobi Manchurian", 100.0),
        ("Lassi", 40.0),
    ]
    return [MenuItem(number, name, price) for number, (name, price) in enumerate(dishes, start=1)]