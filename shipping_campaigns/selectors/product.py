from __future__ import annotations

from typing import Iterable, Union

from ..engine.conditions import Mode
from ..engine.matching import MatchKind, partial_match
from ..engine.registry import register_condition
from .base import Selector


@register_condition
class ProductTagSelector(Selector):
    """Line item selector on product tags (any tag vs any configured tag)."""

    type_name = "product_tag"

    def __init__(
        self,
        mode: Union[Mode, str],
        match_kind: Union[MatchKind, str],
        tags: Iterable[str],
    ):
        self.mode = Mode.parse(mode)
        self.match_kind = MatchKind.parse(match_kind)
        self.tags = [str(t).lower() for t in tags]

    def matches(self, line_item, selector=None) -> bool:
        item_tags = [str(t).lower() for t in line_item.tags]
        return partial_match(self.match_kind, item_tags, self.tags) ^ (
            self.mode is Mode.DOES_NOT
        )


@register_condition
class ProductTitleSelector(Selector):
    type_name = "product_title"

    def __init__(
        self,
        mode: Union[Mode, str],
        match_kind: Union[MatchKind, str],
        titles: Iterable[str],
    ):
        self.mode = Mode.parse(mode)
        self.match_kind = MatchKind.parse(match_kind)
        self.titles = [str(t).lower() for t in titles]

    def matches(self, line_item, selector=None) -> bool:
        title = str(line_item.title).lower()
        return partial_match(self.match_kind, title, self.titles) ^ (
            self.mode is Mode.DOES_NOT
        )
