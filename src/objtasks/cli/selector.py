"""CLI commands: objtasks check / build / combine -- selector construction."""

from __future__ import annotations

import sys

import click

from objtasks.config import ObjtasksConfig
from objtasks.selector import (
    EMPTY,
    SelectorError,
    combine as combine_selectors,
    parse_selector,
)


@click.command()
@click.argument("selector")
def check(selector: str) -> None:
    """Parse and validate a selector, printing its canonical text.

    Exits with code 1 if the selector is unreadable or breaks the part
    ordering rules.
    """
    try:
        parsed = parse_selector(selector)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(parsed.stringify())


@click.command()
@click.option("--element", default=None, help="Element (type) name")
@click.option("--id", "id_", default=None, help="Id")
@click.option("--class", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attrs", multiple=True, help="Attribute body (repeatable)")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)")
@click.option("--pseudo-element", default=None, help="Pseudo-element")
def build(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a selector from its parts, in canonical order."""
    selector = EMPTY
    if element is not None:
        selector = selector.element(element)
    if id_ is not None:
        selector = selector.id(id_)
    for name in classes:
        selector = selector.class_(name)
    for body in attrs:
        selector = selector.attr(body)
    for name in pseudo_classes:
        selector = selector.pseudo_class(name)
    if pseudo_element is not None:
        selector = selector.pseudo_element(pseudo_element)

    if not selector.stringify():
        click.echo("Nothing to build: pass at least one part option", err=True)
        sys.exit(1)
    click.echo(selector.stringify())


@click.command()
@click.argument("left")
@click.argument("combinator", required=False)
@click.argument("right", required=False)
@click.pass_obj
def combine(
    config: ObjtasksConfig | None, left: str, combinator: str | None, right: str | None
) -> None:
    """Combine two selectors: LEFT COMBINATOR RIGHT, or LEFT RIGHT for descendant."""
    if right is None:
        if combinator is None:
            raise click.UsageError("RIGHT selector is required")
        right, combinator = combinator, (config or ObjtasksConfig()).default_combinator

    try:
        result = combine_selectors(parse_selector(left), combinator, parse_selector(right))
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(result.stringify())
