from typing import Optional, Union

from emberexchange.loot_loader import LOOT_TABLE
from emberexchange.models.loot_models import DrawStrip, LootTable, WeightedCategory
from emberexchange.rng import get_rng

STRIP_LENGTH = 60
FINAL_INDEX = 40

CATEGORY_IDENTIFIERS = {
    "Common": 1,
    "Uncommon": 2,
    "Rare": 3,
    "Epic": 4,
    "Legendary": 5,
}

IDENTIFIER_CATEGORIES = {v: k for k, v in CATEGORY_IDENTIFIERS.items()}

UNKNOWN_IDENTIFIER = -1


def weighted_pick(table: LootTable, rng) -> WeightedCategory:
    """
    Cumulative-weight scan over the table in declared order.
    The first category that brings the remainder to zero or below wins.
    """
    categories = table.categories
    r = rng.random() * table.total_weight

    for category in categories:
        r -= category.weight
        if r <= 0:
            return category

    return categories[0]


def build_strip(
    table: LootTable,
    rng,
    strip_length: int = STRIP_LENGTH,
    final_index: int = FINAL_INDEX,
) -> DrawStrip:
    if not 0 <= final_index < strip_length:
        raise ValueError("final_index must fall inside the strip")

    items = [weighted_pick(table, rng) for _ in range(strip_length)]
    final_item = weighted_pick(table, rng)
    # the reveal animation always stops on this slot
    items[final_index] = final_item

    return DrawStrip(items=tuple(items), final_item=final_item, final_index=final_index)


def category_to_identifier(category: Union[WeightedCategory, str, None]) -> int:
    if isinstance(category, WeightedCategory):
        category = category.name
    if not isinstance(category, str):
        return UNKNOWN_IDENTIFIER
    return CATEGORY_IDENTIFIERS.get(category, UNKNOWN_IDENTIFIER)


def identifier_to_category(identifier: int) -> Optional[str]:
    return IDENTIFIER_CATEGORIES.get(identifier)


class LootboxEngine:
    """
    Draw engine bound to one loot table and one random source.

    Holds no per-draw state: every build_strip() call returns a new DrawStrip,
    so one engine can be shared between callers.
    """

    def __init__(
        self,
        table: LootTable = LOOT_TABLE,
        rng=None,
        seed: Optional[int] = None,
        strip_length: int = STRIP_LENGTH,
        final_index: int = FINAL_INDEX,
    ):
        self.table = table
        self.rng = rng if rng is not None else get_rng(seed)
        self.strip_length = strip_length
        self.final_index = final_index

    def weighted_pick(self) -> WeightedCategory:
        return weighted_pick(self.table, self.rng)

    def build_strip(self) -> DrawStrip:
        return build_strip(self.table, self.rng, self.strip_length, self.final_index)

    def category_to_identifier(self, category) -> int:
        return category_to_identifier(category)
