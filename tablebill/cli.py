"""Interactive console for taking orders and viewing records."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from tablebill.restaurant import Restaurant, TableUnavailableError, UnknownItemError

_WORD_PATTERN = re.compile(r"\S+")


class _Input:
    """Reads whitespace-separated words, single characters and whole lines."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> None:
        line = self._stream.readline()
        if not line:
            raise EOFError
        self._buffer += line

    def _skip_space(self) -> None:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return
            self._fill()

    def word(self) -> str:
        self._skip_space()
        match = _WORD_PATTERN.match(self._buffer)
        self._buffer = self._buffer[match.end():]
        return match.group()

    def integer(self) -> int | None:
        try:
            return int(self.word())
        except ValueError:
            return None

    def char(self) -> str:
        self._skip_space()
        first, self._buffer = self._buffer[0], self._buffer[1:]
        return first

    def ignore(self) -> None:
        if not self._buffer:
            self._fill()
        self._buffer = self._buffer[1:]

    def line(self) -> str:
        if not self._buffer:
            self._fill()
        text, _, self._buffer = self._buffer.partition("\n")
        return text.rstrip("\r")


class Console:
    """Menu-driven front end to a restaurant."""

    def __init__(
        self,
        restaurant: Restaurant,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.restaurant = restaurant
        self._input = _Input(stdin if stdin is not None else sys.stdin)
        self._out = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)

    def run(self) -> None:
        """Show the main menu until the user exits or input ends."""
        try:
            while True:
                self._write(
                    "\n==== RESTAURANT SYSTEM ====\n"
                    "1. Show Menu\n"
                    "2. Take Order\n"
                    "3. Show Order History\n"
                    "4. Show Feedback\n"
                    "5. Exit\n"
                    "Choose an option: "
                )
                choice = self._input.integer()
                if choice == 1:
                    self._write(self.restaurant.format_menu())
                elif choice == 2:
                    self.take_order()
                elif choice == 3:
                    self._show("Order History", self.restaurant.order_history())
                elif choice == 4:
                    self._show("Customer Feedback", self.restaurant.feedback_lines())
                elif choice == 5:
                    self._write("Exiting...\n")
                    return
                else:
                    self._write("Invalid choice!\n")
        except EOFError:
            return

    def _show(self, title: str, lines: list[str]) -> None:
        self._write(f"\n---- {title} ----\n")
        self._write("".join(f"{line}\n" for line in lines))

    def take_order(self) -> None:
        """Take one order from name and table through items to bill."""
        self._write("Enter customer name: ")
        self._input.ignore()
        customer = self._input.line()

        tables = "".join(f"{number} " for number in self.restaurant.available_tables())
        self._write(f"\nAvailable Tables: {tables}\n")
        self._write("Choose a table number: ")
        table_number = self._input.integer()

        try:
            if table_number is None:
                raise TableUnavailableError("no table number given")
            order = self.restaurant.open_order(customer, table_number)
        except TableUnavailableError:
            self._write("Table not available or invalid!\n")
            return

        while True:
            self._write(self.restaurant.format_menu())
            self._write("Enter item ID: ")
            item_id = self._input.integer()
            self._write("Enter quantity: ")
            quantity = self._input.integer()
            try:
                if item_id is None or quantity is None:
                    raise UnknownItemError("unreadable item")
                self.restaurant.add_to_order(order, item_id, quantity)
            except UnknownItemError:
                self._write("Invalid item ID!\n")
            self._write("Add more items? (y/n): ")
            if self._input.char() not in ("y", "Y"):
                break

        self._write(order.format_bill())
        self.restaurant.close_order(order)
        self._write("Order placed successfully!\n")
        self.collect_feedback(customer)

    def collect_feedback(self, customer_name: str) -> None:
        """Offer the customer a chance to leave feedback."""
        self._write("\nWould you like to leave feedback? (y/n): ")
        response = self._input.char()
        self._input.ignore()
        if response in ("y", "Y"):
            self._write("Enter your feedback: ")
            feedback = self._input.line()
            self.restaurant.save_feedback(customer_name, feedback)
            self._write("Thank you for your feedback!\n")


def main(argv: list[str] | None = None) -> int:
    """Run the restaurant console."""
    parser = argparse.ArgumentParser(description="Restaurant billing console.")
    parser.add_argument(
        "--directory",
        default=".",
        help="directory holding the order and feedback files",
    )
    args = parser.parse_args(argv)
    Console(Restaurant(args.directory)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())