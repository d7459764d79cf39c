import json
from pathlib import Path

from emberexchange.models.loot_models import LootTable, WeightedCategory

LOOT_TABLE_PATH = Path(__file__).parent / "loot_table.json"


def load_loot_table(path=LOOT_TABLE_PATH) -> LootTable:
    with open(path, "r") as f:
        raw = json.load(f)
    return LootTable(categories=tuple(WeightedCategory(**entry) for entry in raw))


LOOT_TABLE = load_loot_table()
