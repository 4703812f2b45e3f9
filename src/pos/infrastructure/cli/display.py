"""Shared table formatting for products, carts and orders."""

from __future__ import annotations

import click

from pos.application.dto import CartDTO, OrderDTO, ProductDTO


def display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products available.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10}")


def display_cart(cart: CartDTO) -> None:
    if cart.is_empty:
        click.echo("Shopping cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*54}")
    for item in cart.items:
        click.echo(
            f"  {item.product_id:<6} {item.product_name:<20} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.subtotal:>10}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Cart Total':<34} {cart.total:>20}")


def display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (paid with {dto.payment_method})")
    click.echo(f"Placed:  {dto.placed_at}")
    click.echo()
    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*54}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<6} {item.product_name:<20} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Order Total':<34} {dto.total:>20}")
