"""Restaurant state: menu, tables, orders and feedback files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from tablebill.models import MenuItem, Order, OrderItem, default_menu

ORDERS_FILE = "orders.txt"
FEEDBACK_FILE = "feedback.txt"
FIRST_ORDER_ID = 1000


class TableUnavailableError(Exception):
    """The table does not exist or is already booked."""


class UnknownItemError(LookupError):
    """No menu item has the requested id."""


class Restaurant:
    """Menu, table bookings and persistent order and feedback records."""

    def __init__(
        self,
        directory: str | Path = ".",
        menu: Iterable[MenuItem] | None = None,
        table_count: int = 10,
    ) -> None:
        self.directory = Path(directory)
        self.menu = list(default_menu() if menu is None else menu)
        self.tables = {number: False for number in range(1, table_count + 1)}
        self._next_order_id = FIRST_ORDER_ID

    @property
    def orders_path(self) -> Path:
        return self.directory / ORDERS_FILE

    @property
    def feedback_path(self) -> Path:
        return self.directory / FEEDBACK_FILE

    def format_menu(self) -> str:
        """The menu as displayed to staff."""
        rows = "".join(
            f"{item.id}. {item.name:<25}Rs. {item.price:.2f}\n" for item in self.menu
        )
        return "\n------ MENU ------\n" + rows + "------------------\n"

    def available_tables(self) -> list[int]:
        """Numbers of the free tables, ascending."""
        return sorted(number for number, booked in self.tables.items() if not booked)

    def book_table(self, table_number: int) -> None:
        """Mark a free table as booked."""
        if self.tables.get(table_number, True):
            raise TableUnavailableError(f"table {table_number} is not available")
        self.tables[table_number] = True

    def free_table(self, table_number: int) -> None:
        """Release a table; unknown numbers are ignored."""
        if table_number in self.tables:
            self.tables[table_number] = False

    def find_item(self, item_id: int) -> MenuItem:
        """Look up a menu item by id."""
        for item in self.menu:
            if item.id == item_id:
                return item
        raise UnknownItemError(f"no menu item with id {item_id}")

    def open_order(self, customer_name: str, table_number: int) -> Order:
        """Book the table and start a new order for it."""
        self.book_table(table_number)
        order = Order(self._next_order_id, customer_name, table_number)
        self._next_order_id += 1
        return order

    def add_to_order(self, order: Order, item_id: int, quantity: int) -> OrderItem:
        """Add a quantity of a menu item to an order."""
        line = OrderItem(self.find_item(item_id), quantity)
        order.add_item(line)
        return line

    def close_order(self, order: Order) -> None:
        """Record the order in the history file and free its table."""
        with self.orders_path.open("a", encoding="utf-8") as handle:
            handle.write(order.record_line())
        self.free_table(order.table_number)

    def save_feedback(self, customer_name: str, feedback: str) -> None:
        """Append a customer's feedback to the feedback file."""
        with self.feedback_path.open("a", encoding="utf-8") as handle:
            handle.write(
                f"Customer: {customer_name}\nFeedback: {feedback}\n"
                "-----------------------------\n"
            )

    @staticmethod
    def _read_lines(path: Path) -> list[str]:
        try:
            return path.read_text(encoding="utf-8").splitlines()
        except FileNotFoundError:
            return []

    def order_history(self) -> list[str]:
        """Lines of the order history file, empty when there is none."""
        return self._read_lines(self.orders_path)

    def feedback_lines(self) -> list[str]:
        """Lines of the feedback file, empty when there is none."""
        return self._read_lines(self.feedback_path)