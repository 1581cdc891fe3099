from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, TextIO

from returns.result import Result, Success

from order_desk.bootstrap import UseCases
from order_desk.core.domain.model.errors import OrderError
from order_desk.core.ports.inbound.add_order import AddOrderCommand, AddOrderLine
from order_desk.core.ports.inbound.delete_order import DeleteOrderCommand
from order_desk.core.ports.inbound.get_order import OrderView
from order_desk.core.ports.inbound.query_orders import QueryOrdersQuery
from order_desk.core.ports.inbound.update_order import UpdateOrderCommand

MENU = (
    "Select an action:\n"
    "1. Add order\n"
    "2. Delete order\n"
    "3. Update order\n"
    "4. Query orders\n"
    "5. Exit\n"
)
EXIT_WORD = "exit"


class _EndOfInput(Exception):
    pass


def run_console(
    usecases: UseCases, stdin: TextIO | None = None, stdout: TextIO | None = None
) -> int:
    """
    Interactive menu over the order use cases.

    Returns 0 when the user picks "Exit" or stdin reaches EOF.
    """
    console = Console(usecases, stdin or sys.stdin, stdout or sys.stdout)
    return console.run()


@dataclass
class Console:
    usecases: UseCases
    stdin: TextIO
    stdout: TextIO

    def run(self) -> int:
        actions: Dict[str, Callable[[], None]] = {
            "1": self._add,
            "2": self._delete,
            "3": self._update,
            "4": self._query,
        }
        try:
            while True:
                self._write(MENU)
                choice = self._ask("> ").strip()
                if choice == "5":
                    return 0
                action = actions.get(choice)
                if action is None:
                    self._say("Invalid choice, try again.")
                    continue
                action()
        except _EndOfInput:
            return 0

    # ---- actions -----------------------------------------------------------

    def _add(self) -> None:
        order_id = self._ask("Order id: ")
        customer = self._ask("Customer: ")
        lines: List[AddOrderLine] = []
        while True:
            product_name = self._ask(f"Product name ('{EXIT_WORD}' to finish): ")
            if product_name.strip().lower() == EXIT_WORD:
                break
            amount = self._ask_amount("Amount: ")
            lines.append(AddOrderLine(product_name=product_name, amount=amount))

        result = self.usecases.add_order.add_order(
            AddOrderCommand(order_id=order_id, customer=customer, lines=tuple(lines))
        )
        self._report(result, "Order added.")

    def _delete(self) -> None:
        order_id = self._ask("Order id to delete: ")
        result = self.usecases.delete_order.delete_order(
            DeleteOrderCommand(order_id=order_id)
        )
        self._report(result, "Order deleted.")

    def _update(self) -> None:
        order_id = self._ask("Order id to update: ")
        customer = self._ask("New customer: ")
        result = self.usecases.update_order.update_order(
            UpdateOrderCommand(order_id=order_id, customer=customer)
        )
        self._report(result, "Order updated.")

    def _query(self) -> None:
        keyword = self._ask("Keyword (optional): ")
        min_amount = self._ask_amount("Minimum total (optional): ", optional=True)
        max_amount = self._ask_amount("Maximum total (optional): ", optional=True)
        result = self.usecases.query_orders.query_orders(
            QueryOrdersQuery(
                keyword=keyword or None, min_amount=min_amount, max_amount=max_amount
            )
        )
        if not isinstance(result, Success):
            self._say(str(result.failure()))
            return

        views: Sequence[OrderView] = result.unwrap()
        self._say("Results:")
        for view in views:
            for line in format_order(view):
                self._say(line)

    # ---- io helpers --------------------------------------------------------

    def _report(self, result: Result[object, OrderError], ok_message: str) -> None:
        if isinstance(result, Success):
            self._say(ok_message)
        else:
            self._say(str(result.failure()))

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        raw = self.stdin.readline()
        if not raw:
            raise _EndOfInput()
        return raw.rstrip("\r\n")

    def _ask_amount(self, prompt: str, optional: bool = False) -> float | None:
        while True:
            raw = self._ask(prompt).strip()
            if optional and not raw:
                return None
            amount = parse_amount(raw)
            if amount is not None:
                return amount
            self._say("Invalid amount.")

    def _say(self, text: str) -> None:
        self._write(text + "\n")

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()


def parse_amount(raw: str) -> float | None:
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def format_amount(value: float) -> str:
    return f"{value:.15g}"


def format_order(view: OrderView) -> List[str]:
    lines = [
        f"id: {view.order_id.value}, customer: {view.customer.value}, "
        f"total: {format_amount(view.total)}"
    ]
    lines.extend(
        f"  product: {ln.product_name}, amount: {format_amount(ln.amount)}"
        for ln in view.lines
    )
    return lines
