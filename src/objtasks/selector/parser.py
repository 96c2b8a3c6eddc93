"""Lark-based reader for selector text.

Parsed parts are replayed through the builder, so text that violates part
ordering or singleton rules raises the same errors as the fluent API.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from objtasks.selector.builder import EMPTY, Selector, combine
from objtasks.selector.errors import SelectorSyntaxError
from objtasks.selector.model import Kind

__all__ = ["parse_selector"]

log = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_Part = tuple[Kind, str]


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Turn the parse tree into compounds of ``(Kind, value)`` parts and combinators."""

    # ---- parts ----

    def element(self, items: list[Token]) -> _Part:
        return (Kind.ELEMENT, str(items[0]))

    def id(self, items: list[Token]) -> _Part:
        return (Kind.ID, str(items[0]))

    def class_(self, items: list[Token]) -> _Part:
        return (Kind.CLASS, str(items[0]))

    def attribute(self, items: list[Token]) -> _Part:
        return (Kind.ATTRIBUTE, str(items[0]))

    def pseudo_class(self, items: list[Token]) -> _Part:
        return (Kind.PSEUDO_CLASS, str(items[0]))

    def pseudo_element(self, items: list[Token]) -> _Part:
        return (Kind.PSEUDO_ELEMENT, str(items[0]))

    # ---- structural ----

    def compound(self, items: list[_Part]) -> list[_Part]:
        return list(items)

    def COMBINATOR(self, token: Token) -> str:
        return token.strip() or " "

    def start(self, items: list[object]) -> list[object]:
        return list(items)


def _build_compound(parts: list[_Part]) -> Selector:
    selector = EMPTY
    for kind, value in parts:
        selector = selector.append(kind, value)
    return selector


def parse_selector(source: str) -> Selector:
    """Parse selector text such as ``div#main.box + a:hover`` into a ``Selector``.

    Compounds are folded left with ``combine``. Raises ``SelectorSyntaxError``
    for unreadable text, and ``OrderViolation`` or ``DuplicateSingleton`` when
    a compound breaks the builder's rules.
    """
    parser = Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )
    try:
        tree = parser.parse(source.strip())
    except UnexpectedInput as e:
        log.debug("unparseable selector %r: %s", source, e)
        raise SelectorSyntaxError(
            f"Invalid selector {source!r}: {e}",
            line=getattr(e, "line", None),
            column=getattr(e, "column", None),
        ) from e

    items = SelectorTransformer().transform(tree)
    result = _build_compound(items[0])
    for combinator, parts in zip(items[1::2], items[2::2]):
        result = combine(result, combinator, _build_compound(parts))
    return result
