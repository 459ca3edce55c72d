# tablebill

A small restaurant billing system that runs in the terminal. It shows the
menu, books one of ten tables, takes an order, prints the bill, keeps a
history of every order and can collect customer feedback.

## Installing

```
pip install .
```

## Running

```
tablebill
```

By default the order and feedback files are kept in the current directory.
To keep them elsewhere:

```
tablebill --directory /path/to/records
```

The command opens a numbered menu:

```
==== RESTAURANT SYSTEM ====
1. Show Menu
2. Take Order
3. Show Order History
4. Show Feedback
5. Exit
```

Taking an order asks for the customer's name, lists the free tables, and
then asks for item IDs and quantities until you answer anything other than
`y` or `Y` to "Add more items?". An unknown item ID prints
"Invalid item ID!" and the order goes on. The bill is printed, the order is
appended to `orders.txt`, the table is freed again, and the customer may
leave feedback, which is appended to `feedback.txt`.

Choosing a table that is taken or does not exist ends the order with
"Table not available or invalid!". The console also stops when its input
runs out.

Order IDs start at 1000 and go up by one for each order in a session.

## Using it from Python

```python
from tablebill.restaurant import Restaurant

restaurant = Restaurant(".")
order = restaurant.open_order("Asha", 3)
restaurant.add_to_order(order, 1, 2)   # two Masala Dosa
restaurant.add_to_order(order, 7, 1)   # one Coffee
print(order.format_bill())
restaurant.close_order(order)          # saves the order and frees table 3
```

`Restaurant(directory, menu, table_count)` takes the directory for its
files, an optional list of `MenuItem` (the default is
`tablebill.models.default_menu()`, twelve dishes) and the number of tables
(10 by default).

- `open_order` raises `TableUnavailableError` when the table is taken or
  does not exist.
- `add_to_order` and `find_item` raise `UnknownItemError` for an item ID
  that is not on the menu.
- `available_tables()` lists the free table numbers in ascending order;
  `book_table` and `free_table` change a table's state directly.
- `save_feedback(customer_name, feedback)` appends to the feedback file.
- `order_history()` and `feedback_lines()` return the saved lines, or an
  empty list when the file does not exist yet.
- `format_menu()` returns the menu as the console shows it.

`tablebill.models` holds `MenuItem`, `OrderItem` (with `total()`) and
`Order` (with `add_item`, `total_bill`, `format_bill` and `record_line`,
the text appended to `orders.txt`).

`tablebill.cli.Console(restaurant, stdin, stdout)` runs the menu-driven
console over any text streams.

## What it does not do

Orders are only appended to `orders.txt` as text; the package does not read
them back into orders, and order IDs restart at 1000 in every session.
Tables are free again as soon as an order is closed, and bookings are not
kept between sessions.

## Tests

```
pip install .[test]
pytest
```