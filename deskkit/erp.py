"""A small inventory, expense and finance management system."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator

MAX_PRODUCTS = 100
MAX_EXPENSES = 100

MENU = (
    "Menu:\n1. Add Product\n2. Display Products\n3. Search Product by ID\n"
    "4. Update Product Price\n5. Manage Expenses\n6. Display Expenses\n"
    "7. Manage Finance\n8. Exit\n"
)


def _money(value: float) -> str:
    return f"{value:g}"


class CapacityError(Exception):
    """Raised when a store is already holding as many items as it may."""


class ProductNotFoundError(LookupError):
    """Raised when no product carries the requested id."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product with ID {product_id} not found.")
        self.product_id = product_id


@dataclass
class Product:
    product_id: int
    name: str
    price: float
    quantity: int

    @property
    def revenue(self) -> float:
        return self.price * self.quantity

    def __str__(self) -> str:
        return (
            f"ID: {self.product_id}\nName: {self.name}\n"
            f"Price: Rs{_money(self.price)}\nQuantity: {self.quantity}"
        )


@dataclass
class Expense:
    description: str
    amount: float

    def __str__(self) -> str:
        return f"Description: {self.description}\nAmount: Rs{_money(self.amount)}"


@dataclass(frozen=True)
class FinanceSummary:
    total_revenue: float
    total_expenses: float

    @property
    def profit(self) -> float:
        return self.total_revenue - self.total_expenses

    def __str__(self) -> str:
        return (
            "Finance Management Summary:\n"
            f"Total Revenue: Rs{_money(self.total_revenue)}\n"
            f"Total Expenses: Rs{_money(self.total_expenses)}\n"
            f"Profit: Rs{_money(self.profit)}"
        )


class ManagementSystem:
    """Products and expenses held in memory, each store with a fixed capacity."""

    def __init__(self, max_products: int = MAX_PRODUCTS, max_expenses: int = MAX_EXPENSES) -> None:
        self.max_products = max_products
        self.max_expenses = max_expenses
        self._products: list[Product] = []
        self._expenses: list[Expense] = []

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    @property
    def expenses(self) -> tuple[Expense, ...]:
        return tuple(self._expenses)

    def add_product(self, product_id: int, name: str, price: float, quantity: int) -> Product:
        if len(self._products) >= self.max_products:
            raise CapacityError("Cannot add more products. Array is full.")
        product = Product(product_id, name, price, quantity)
        self._products.append(product)
        return product

    def find_product(self, product_id: int) -> Product:
        """Return the first product with the given id."""
        for product in self._products:
            if product.product_id == product_id:
                return product
        raise ProductNotFoundError(product_id)

    def update_price(self, product_id: int, new_price: float) -> Product:
        product = self.find_product(product_id)
        product.price = new_price
        return product

    def add_expense(self, description: str, amount: float) -> Expense:
        if len(self._expenses) >= self.max_expenses:
            raise CapacityError("Cannot add more expenses. Array is full.")
        expense = Expense(description, amount)
        self._expenses.append(expense)
        return expense

    def finance_summary(self) -> FinanceSummary:
        return FinanceSummary(
            total_revenue=sum((product.revenue for product in self._products), 0.0),
            total_expenses=sum((expense.amount for expense in self._expenses), 0.0),
        )


class _EndOfInput(Exception):
    pass


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str, kind=str):
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise _EndOfInput
    return kind(token)


def _show_all(items, empty: str, title: str) -> None:
    if not items:
        print(empty)
        return
    print(title)
    for item in items:
        print(item)
        print()


def _run_choice(system: ManagementSystem, choice: int, tokens: Iterator[str]) -> None:
    if choice == 1:
        if len(system.products) >= system.max_products:
            print("Cannot add more products. Array is full.")
            return
        print("Enter product details:")
        product_id = _ask(tokens, "ID: ", int)
        name = _ask(tokens, "Name: ")
        price = _ask(tokens, "Price: ", float)
        quantity = _ask(tokens, "Quantity: ", int)
        system.add_product(product_id, name, price, quantity)
        print("Product added successfully!")
    elif choice == 2:
        _show_all(system.products, "No products found.", "Products:")
    elif choice in (3, 4):
        if not system.products:
            print("No products found.")
            return
        verb = "search" if choice == 3 else "update"
        product_id = _ask(tokens, f"Enter the ID of the product to {verb}: ", int)
        try:
            product = system.find_product(product_id)
        except ProductNotFoundError as error:
            print(error)
            return
        if choice == 3:
            print(product)
        else:
            system.update_price(product_id, _ask(tokens, "Enter the new price: ", float))
            print("Price updated successfully!")
    elif choice == 5:
        if len(system.expenses) >= system.max_expenses:
            print("Cannot add more expenses. Array is full.")
            return
        print("Enter expense details:")
        description = _ask(tokens, "Description: ")
        amount = _ask(tokens, "Amount: ", float)
        system.add_expense(description, amount)
        print("Expense added successfully!")
    elif choice == 6:
        _show_all(system.expenses, "No expenses found.", "Expenses:")
    elif choice == 7:
        print(system.finance_summary())
    elif choice == 8:
        print("Exiting the program...")
    else:
        print("Invalid choice! Please try again.")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive management menu on standard input."""
    argparse.ArgumentParser(description="Product and expense management.").parse_args(argv)
    system = ManagementSystem()
    tokens = _tokens(sys.stdin)
    print("Welcome to the Management System!")
    choice = 0
    try:
        while choice != 8:
            print(MENU, end="")
            try:
                choice = _ask(tokens, "Enter your choice: ", int)
            except ValueError:
                choice = 0
            try:
                _run_choice(system, choice, tokens)
            except ValueError:
                print("Invalid input.")
    except _EndOfInput:
        pass
    return 0