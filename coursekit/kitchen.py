"""A kitchen simulation: items cook minute by minute and fill promised orders."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Iterator, Sequence


@dataclass
class Item:
    """A dish with the minutes of cooking it still needs."""

    cook_time: int
    name: str


@dataclass
class Order:
    """A customer order with the minutes left before it expires."""

    order_id: int
    promised_time: int
    items: list[str] = field(default_factory=list)


_ITEM_KEY = attrgetter("cook_time", "name")
_ORDER_KEY = attrgetter("promised_time", "order_id")


def can_fill_order(order: Order, completed: Sequence[Item]) -> list[int] | None:
    """Return the positions in ``completed`` that fill the order, or None.

    The order's items are taken in sorted order; repeated items of one kind
    are matched to successive completed items of that name.
    """
    used: list[int] = []
    previous = None
    position = 0
    for wanted in sorted(order.items):
        if wanted != previous:
            position = 0
            previous = wanted
        while position < len(completed) and completed[position].name != wanted:
            position += 1
        if position == len(completed):
            return None
        used.append(position)
        position += 1
    return used


class Kitchen:
    """Orders waiting, items cooking and items finished but not yet served."""

    def __init__(self) -> None:
        self.orders: list[Order] = []
        self.cooking: list[Item] = []
        self.completed: list[Item] = []

    def add_order(self, order_id: int, promised_time: int, items: Sequence[str]) -> list[str]:
        """Accept an order; it joins the queue by promised time, then id."""
        if not items:
            raise ValueError("an order needs at least one item")
        lines = [f"Received new order #{order_id} due in {promised_time} minute(s):"]
        lines.extend(f"  {item}" for item in items)
        self.orders.append(Order(order_id, promised_time, list(items)))
        self.orders.sort(key=_ORDER_KEY)
        return lines

    def add_item(self, cook_time: int, name: str) -> list[str]:
        """Start cooking an item; the cooking list stays ordered by time, then name."""
        if cook_time < 0:
            raise ValueError("cook time must not be negative")
        self.cooking.append(Item(cook_time, name))
        self.cooking.sort(key=_ITEM_KEY)
        return [f"Cooking new {name} with {cook_time} minute(s) left."]

    @staticmethod
    def _order_lines(orders: Sequence[Order]) -> list[str]:
        lines = []
        for order in orders:
            lines.append(f"  #{order.order_id} ({order.promised_time} minute(s) left):")
            lines.extend(f"    {item}" for item in order.items)
        return lines

    def report_orders_by_time(self) -> list[str]:
        header = f"Printing {len(self.orders)} order(s) by promised time remaining:"
        return [header, *self._order_lines(self.orders)]

    def report_orders_by_id(self) -> list[str]:
        ordered = sorted(self.orders, key=attrgetter("order_id"))
        return [f"Printing {len(ordered)} order(s) by ID:", *self._order_lines(ordered)]

    def report_cooking(self) -> list[str]:
        lines = [f"Printing {len(self.cooking)} items being cooked:"]
        lines.extend(f"  {item.name} ({item.cook_time} minute(s) left)" for item in self.cooking)
        return lines

    def report_completed(self) -> list[str]:
        lines = [f"Printing {len(self.completed)} completely cooked items:"]
        lines.extend(f"  {item.name}" for item in self.completed)
        return lines

    def _fill(self, order: Order, used: list[int], lines: list[str]) -> None:
        lines.append(f"Filled order #{order.order_id}")
        lines.extend(f"Removed a {self.completed[i].name} from completed items." for i in used)
        taken = set(used)
        self.completed = [item for i, item in enumerate(self.completed) if i not in taken]

    def _finish(self, item: Item, lines: list[str]) -> None:
        lines.append(f"Finished cooking {item.name}")
        self.completed.append(item)

    def _tick(self, lines: list[str]) -> None:
        """One minute: cook everything, then serve or age every order."""
        still_cooking = []
        for item in self.cooking:
            item.cook_time -= 1
            if item.cook_time < 0:
                self._finish(item, lines)
            else:
                still_cooking.append(item)
        self.cooking = still_cooking

        waiting = []
        for order in self.orders:
            used = can_fill_order(order, self.completed)
            if used is not None:
                self._fill(order, used, lines)
                continue
            order.promised_time -= 1
            if order.promised_time < 0:
                lines.append(f"Order # {order.order_id} expired.")
            else:
                waiting.append(order)
        self.orders = waiting

    def _settle(self, lines: list[str]) -> None:
        """Handle what is due now without letting any time pass."""
        still_cooking = []
        for item in self.cooking:
            if item.cook_time == 0:
                self._finish(item, lines)
            else:
                still_cooking.append(item)
        self.cooking = still_cooking

        waiting = []
        for order in self.orders:
            used = can_fill_order(order, self.completed)
            if used is not None:
                self._fill(order, used, lines)
            elif order.promised_time == 0:
                lines.append(f"Order # {order.order_id} expired.")
            else:
                waiting.append(order)
        self.orders = waiting

    def run_for_time(self, minutes: int) -> list[str]:
        """Simulate a number of minutes; zero settles what is due right now."""
        if minutes < 0:
            raise ValueError("run time must not be negative")
        lines = [f"===Starting run of {minutes} minute(s)==="]
        if minutes > 0:
            for _ in range(minutes):
                self._tick(lines)
        else:
            self._settle(lines)
        lines.append("===Run for specified time is complete===")
        return lines

    def run_until_next(self) -> list[str]:
        """Simulate until the first event: an item finishing, or an order filled or expired."""
        lines = ["Running until next event."]
        if not self.orders and not self.cooking:
            lines.append("No events waiting to process.")
            return lines
        elapsed = 0
        while True:
            for index, item in enumerate(self.cooking):
                item.cook_time -= 1
                if item.cook_time < 0:
                    del self.cooking[index]
                    self._finish(item, lines)
                    lines.append(f"{elapsed} minute(s) have passed.")
                    return lines
            for index, order in enumerate(self.orders):
                used = can_fill_order(order, self.completed)
                if used is not None:
                    del self.orders[index]
                    self._fill(order, used, lines)
                    lines.append(f"{elapsed} minute(s) have passed.")
                    return lines
                order.promised_time -= 1
                if order.promised_time < 0:
                    del self.orders[index]
                    lines.append(f"Order # {order.order_id} expired.")
                    lines.append(f"{elapsed} minute(s) have passed.")
                    return lines
            elapsed += 1


def _next(tokens: Iterator[str], command: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"missing argument for {command}") from None


def run_script(text: str) -> str:
    """Run a whitespace-separated command script and return everything it reports."""
    kitchen = Kitchen()
    lines: list[str] = []
    tokens = iter(text.split())
    for command in tokens:
        if command == "add_order":
            order_id = int(_next(tokens, command))
            promised_time = int(_next(tokens, command))
            count = int(_next(tokens, command))
            if count <= 0:
                raise ValueError("an order needs at least one item")
            items = [_next(tokens, command) for _ in range(count)]
            lines += kitchen.add_order(order_id, promised_time, items)
        elif command == "add_item":
            cook_time = int(_next(tokens, command))
            lines += kitchen.add_item(cook_time, _next(tokens, command))
        elif command == "print_orders_by_time":
            lines += kitchen.report_orders_by_time()
        elif command == "print_orders_by_id":
            lines += kitchen.report_orders_by_id()
        elif command == "print_kitchen_is_cooking":
            lines += kitchen.report_cooking()
        elif command == "print_kitchen_has_completed":
            lines += kitchen.report_completed()
        elif command == "run_for_time":
            lines += kitchen.run_for_time(int(_next(tokens, command)))
        elif command == "run_until_next":
            lines += kitchen.run_until_next()
    return "".join(f"{line}\n" for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry: read a script from a file argument or standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        print("Usage: kitchen [script_file]", file=sys.stderr)
        return 1
    try:
        if args:
            with open(args[0], encoding="utf-8") as handle:
                text = handle.read()
        else:
            text = sys.stdin.read()
    except OSError:
        print(f"Could not open {args[0]} to read.", file=sys.stderr)
        return 1
    try:
        sys.stdout.write(run_script(text))
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())