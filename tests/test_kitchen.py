import pytest

from coursekit.kitchen import Item, Kitchen, Order, can_fill_order, run_script


def test_add_item_reports_and_orders_by_time_then_name():
    kitchen = Kitchen()
    assert kitchen.add_item(2, "burger") == ["Cooking new burger with 2 minute(s) left."]
    kitchen.add_item(1, "salad")
    kitchen.add_item(2, "apple")
    assert [item.name for item in kitchen.cooking] == ["salad", "apple", "burger"]


def test_add_item_rejects_negative_time():
    with pytest.raises(ValueError):
        Kitchen().add_item(-1, "soup")


def test_add_order_rejects_empty_items():
    with pytest.raises(ValueError):
        Kitchen().add_order(1, 5, [])


def test_orders_by_time_and_by_id():
    kitchen = Kitchen()
    kitchen.add_order(1, 10, ["cake"])
    kitchen.add_order(2, 3, ["tea"])
    by_time = kitchen.report_orders_by_time()
    by_id = kitchen.report_orders_by_id()
    assert by_time[0] == "Printing 2 order(s) by promised time remaining:"
    assert by_time[1] == "  #2 (3 minute(s) left):"
    assert by_id[1] == "  #1 (10 minute(s) left):"
    assert sorted(by_time) == sorted(by_id[:0] + [by_time[0]] + by_id[1:])


def test_can_fill_order_matches_repeated_items():
    completed = [Item(0, "a"), Item(0, "b"), Item(0, "a")]
    used = can_fill_order(Order(1, 5, ["a", "b", "a"]), completed)
    assert sorted(used) == [0, 1, 2]
    assert [completed[i].name for i in used] == ["a", "a", "b"]


def test_can_fill_order_missing_item():
    completed = [Item(0, "a")]
    assert can_fill_order(Order(1, 5, ["a", "a"]), completed) is None


def test_run_for_time_cooks_then_fills():
    kitchen = Kitchen()
    kitchen.add_item(1, "fries")
    kitchen.add_order(1, 5, ["fries"])
    first = kitchen.run_for_time(1)
    assert first == [
        "===Starting run of 1 minute(s)===",
        "===Run for specified time is complete===",
    ]
    second = kitchen.run_for_time(1)
    assert second == [
        "===Starting run of 1 minute(s)===",
        "Finished cooking fries",
        "Filled order #1",
        "Removed a fries from completed items.",
        "===Run for specified time is complete===",
    ]
    assert kitchen.orders == [] and kitchen.completed == [] and kitchen.cooking == []


def test_run_zero_expires_due_order():
    kitchen = Kitchen()
    kitchen.add_order(7, 0, ["soup"])
    lines = kitchen.run_for_time(0)
    assert "Order # 7 expired." in lines
    assert kitchen.orders == []


def test_run_for_time_rejects_negative():
    with pytest.raises(ValueError):
        Kitchen().run_for_time(-2)


def test_run_until_next_with_nothing():
    assert Kitchen().run_until_next() == [
        "Running until next event.",
        "No events waiting to process.",
    ]


def test_run_until_next_stops_at_finished_item():
    kitchen = Kitchen()
    kitchen.add_item(2, "pie")
    lines = kitchen.run_until_next()
    assert lines[1] == "Finished cooking pie"
    assert lines[-1].endswith(" minute(s) have passed.")
    assert kitchen.report_completed() == ["Printing 1 completely cooked items:", "  pie"]


def test_run_script_end_to_end():
    script = "add_item 0 tea\nadd_order 3 1 1 tea\nrun_for_time 0\nprint_kitchen_has_completed\n"
    assert run_script(script) == (
        "Cooking new tea with 0 minute(s) left.\n"
        "Received new order #3 due in 1 minute(s):\n"
        "  tea\n"
        "===Starting run of 0 minute(s)===\n"
        "Finished cooking tea\n"
        "Filled order #3\n"
        "Removed a tea from completed items.\n"
        "===Run for specified time is complete===\n"
        "Printing 0 completely cooked items:\n"
    )


def test_run_script_missing_argument():
    with pytest.raises(ValueError):
        run_script("add_item 3")