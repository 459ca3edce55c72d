import pytest

from tablebill.models import MenuItem
from tablebill.restaurant import Restaurant, TableUnavailableError, UnknownItemError


@pytest.fixture
def restaurant(tmp_path):
    return Restaurant(tmp_path)


def test_all_tables_free_initially(restaurant):
    assert restaurant.available_tables() == list(range(1, 11))


def test_custom_table_count(tmp_path):
    assert Restaurant(tmp_path, table_count=3).available_tables() == [1, 2, 3]


def test_book_and_free_table(restaurant):
    restaurant.book_table(4)
    assert 4 not in restaurant.available_tables()
    restaurant.free_table(4)
    assert 4 in restaurant.available_tables()


def test_double_booking_raises(restaurant):
    restaurant.book_table(2)
    with pytest.raises(TableUnavailableError):
        restaurant.book_table(2)


@pytest.mark.parametrize("number", [0, 11, -1])
def test_booking_unknown_table_raises(restaurant, number):
    with pytest.raises(TableUnavailableError):
        restaurant.book_table(number)


def test_free_unknown_table_changes_nothing(restaurant):
    restaurant.free_table(42)
    assert restaurant.available_tables() == list(range(1, 11))


def test_find_item(restaurant):
    assert restaurant.find_item(8) == MenuItem(8, "Pizza", 150.0)


def test_find_unknown_item_raises(restaurant):
    with pytest.raises(UnknownItemError):
        restaurant.find_item(99)


def test_format_menu(restaurant):
    text = restaurant.format_menu()
    assert text.startswith("\n------ MENU ------\n")
    assert text.endswith("------------------\n")
    assert f"1. {'Masala Dosa':<25}Rs. 40.00\n" in text
    assert len(text.strip("\n").split("\n")) == len(restaurant.menu) + 2


def test_order_ids_increase(restaurant):
    first = restaurant.open_order("Ann", 1)
    second = restaurant.open_order("Bob", 2)
    assert (first.order_id, second.order_id) == (1000, 1001)


def test_failed_open_keeps_id(restaurant):
    restaurant.book_table(1)
    with pytest.raises(TableUnavailableError):
        restaurant.open_order("Ann", 1)
    assert restaurant.open_order("Bob", 2).order_id == 1000


def test_open_order_books_table(restaurant):
    restaurant.open_order("Ann", 5)
    assert 5 not in restaurant.available_tables()


def test_add_to_order(restaurant):
    order = restaurant.open_order("Ann", 1)
    line = restaurant.add_to_order(order, 3, 2)
    assert line.item.name == "Paneer Butter Masala"
    assert order.items == [line]


def test_add_unknown_item_leaves_order_empty(restaurant):
    order = restaurant.open_order("Ann", 1)
    with pytest.raises(UnknownItemError):
        restaurant.add_to_order(order, 0, 1)
    assert order.items == []


def test_close_order_records_and_frees(restaurant):
    order = restaurant.open_order("Ann", 6)
    restaurant.add_to_order(order, 1, 2)
    restaurant.close_order(order)
    assert 6 in restaurant.available_tables()
    assert restaurant.order_history() == order.record_line().splitlines()


def test_history_appends(restaurant):
    for table in (1, 2):
        order = restaurant.open_order("Ann", table)
        restaurant.add_to_order(order, 7, 1)
        restaurant.close_order(order)
    history = restaurant.order_history()
    assert len(history) == 4
    assert history[0].startswith("1000|Ann|1|")
    assert history[2].startswith("1001|Ann|2|")


def test_missing_files_give_empty(restaurant):
    assert restaurant.order_history() == []
    assert restaurant.feedback_lines() == []


def test_save_feedback(restaurant):
    restaurant.save_feedback("Ann", "Great")
    assert restaurant.feedback_lines() == [
        "Customer: Ann",
        "Feedback: Great",
        "-----------------------------",
    ]