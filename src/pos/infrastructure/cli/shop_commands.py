"""Interactive shopping session: the menu driver around a PosSession."""

from __future__ import annotations

import click

from pos.application.session import PosSession
from pos.domain.exceptions import DomainException, OrderHistoryFullError
from pos.domain.model.payment import PaymentMethod
from pos.infrastructure.cli.display import display_cart, display_order, display_products

MENU = """
===== Point of Sale =====
1. View Products
2. View Shopping Cart
3. Add Product to Cart
4. Checkout
5. View Orders
6. Exit"""

PAYMENT_MENU = """Select payment method:
1. Cash
2. Credit / Debit Card
3. GCash"""

EXIT_CHOICE = 6


def run_menu(session: PosSession) -> None:
    """Loop over the main menu until the user picks Exit."""
    while True:
        click.echo(MENU)
        choice = click.prompt("Enter your choice", type=click.IntRange(1, EXIT_CHOICE))

        if choice == 1:
            display_products(session.list_products())
        elif choice == 2:
            display_cart(session.view_cart())
        elif choice == 3:
            _add_to_cart(session)
        elif choice == 4:
            _checkout(session)
        elif choice == 5:
            _view_orders(session)
        else:
            click.echo("Goodbye!")
            return


def _add_to_cart(session: PosSession) -> None:
    product_id = click.prompt("Enter product ID", type=int)
    quantity = click.prompt("Enter quantity", type=int)

    result = session.add_to_cart(product_id, quantity)
    if not result.ok:
        _report(result.error)
        return
    click.echo("Product added to cart.")


def _checkout(session: PosSession) -> None:
    cart = session.view_cart()
    if cart.is_empty:
        click.echo("Shopping cart is empty. Add products before checking out.")
        return

    display_cart(cart)
    click.echo(PAYMENT_MENU)
    key = click.prompt("Enter your choice", type=click.Choice(["1", "2", "3"]))

    result = session.checkout(PaymentMethod.from_choice(key))
    if result.ok:
        click.echo(f"Order #{result.value.id} placed successfully.")
        return

    _report(result.error)
    if isinstance(result.error, OrderHistoryFullError) and result.value is not None:
        click.echo("Receipt for the unrecorded order:")
        display_order(result.value)
        click.echo(
            "Your cart was kept. Checking out again will charge it again "
            "and fail while the order history is full."
        )


def _view_orders(session: PosSession) -> None:
    orders = session.list_orders()
    if not orders:
        click.echo("No orders have been placed yet.")
        return
    for dto in orders:
        display_order(dto)
        click.echo()


def _report(error: DomainException | None) -> None:
    click.secho(f"Error: {error}", fg="red", err=True)
