"""Tests for the selector kind tables and append check."""

import pytest

from objtasks.selector import (
    KIND_ORDER,
    SINGLETON_KINDS,
    DuplicateSingleton,
    Kind,
    OrderViolation,
    check_append,
)
from objtasks.selector.model import render_part


class TestKindOrder:
    def test_order_follows_declaration(self) -> None:
        ranks = [KIND_ORDER[k] for k in Kind]
        assert ranks == sorted(ranks)
        assert len(set(ranks)) == len(Kind)

    def test_every_kind_ranked(self) -> None:
        assert set(KIND_ORDER) == set(Kind)

    def test_singletons(self) -> None:
        assert SINGLETON_KINDS == {Kind.ELEMENT, Kind.ID, Kind.PSEUDO_ELEMENT}


class TestCheckAppend:
    @pytest.mark.parametrize("kind", list(Kind))
    def test_anything_after_nothing(self, kind: Kind) -> None:
        check_append(None, kind)

    @pytest.mark.parametrize("kind", [Kind.CLASS, Kind.ATTRIBUTE, Kind.PSEUDO_CLASS])
    def test_repeatable_kinds(self, kind: Kind) -> None:
        check_append(kind, kind)

    @pytest.mark.parametrize("kind", sorted(SINGLETON_KINDS, key=KIND_ORDER.get))
    def test_singleton_repeat_rejected(self, kind: Kind) -> None:
        with pytest.raises(DuplicateSingleton):
            check_append(kind, kind)

    def test_lower_rank_rejected(self) -> None:
        with pytest.raises(OrderViolation):
            check_append(Kind.PSEUDO_CLASS, Kind.ATTRIBUTE)

    def test_order_checked_before_singleton(self) -> None:
        with pytest.raises(OrderViolation):
            check_append(Kind.PSEUDO_ELEMENT, Kind.ELEMENT)


class TestRenderPart:
    def test_tokens(self) -> None:
        assert render_part(Kind.ELEMENT, "a") == "a"
        assert render_part(Kind.ID, "a") == "#a"
        assert render_part(Kind.CLASS, "a") == ".a"
        assert render_part(Kind.ATTRIBUTE, "a") == "[a]"
        assert render_part(Kind.PSEUDO_CLASS, "a") == ":a"
        assert render_part(Kind.PSEUDO_ELEMENT, "a") == "::a"
