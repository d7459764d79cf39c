import logging
import sqlite3
from collections import Counter
from functools import lru_cache
from typing import Optional, Protocol

from emberexchange.config import settings
from emberexchange.drop_engine import LootboxEngine, category_to_identifier, weighted_pick
from emberexchange.models.loot_models import LootboxOpening, LootTable, MintResult
from emberexchange.rng import get_rng

logger = logging.getLogger(__name__)


class StoveMinter(Protocol):
    def create_stove(self, type_id: int, owner_id: int) -> tuple[bool, int]:
        ...


@lru_cache(maxsize=None)
def default_engine() -> LootboxEngine:
    """Process-wide engine; a configured seed is applied once, not per call."""
    return LootboxEngine(
        seed=settings.seed,
        strip_length=settings.strip_length,
        final_index=settings.final_index,
    )


def mint_drop(minter: StoveMinter, type_id: int, owner_id: int) -> MintResult:
    """Ask the minter for a new stove; failures come back as a result, not an exception."""
    try:
        success, stove_id = minter.create_stove(type_id, owner_id)
    except (sqlite3.Error, OSError) as e:
        logger.error("Minting stove type %s for player %s failed: %s", type_id, owner_id, e)
        return MintResult(success=False, error=str(e))

    if not success:
        logger.error("Minting stove type %s for player %s inserted no row", type_id, owner_id)
        return MintResult(success=False, error="stove was not created")

    return MintResult(success=True, stove_id=stove_id)


def open_lootbox(owner_id: int, minter: StoveMinter, engine: Optional[LootboxEngine] = None) -> LootboxOpening:
    engine = engine or default_engine()
    strip = engine.build_strip()
    type_id = category_to_identifier(strip.final_item)

    mint = mint_drop(minter, type_id, owner_id)
    logger.info(
        "Player %s opened a lootbox: %s (type %s, minted=%s)",
        owner_id, strip.final_item.name, type_id, mint.success,
    )
    return LootboxOpening(strip=strip, type_id=type_id, owner_id=owner_id, mint=mint)


def simulate_drops(table: LootTable, simulations: int, seed: Optional[int] = None) -> dict:
    """Simulate multiple picks and return count statistics per category."""
    if simulations <= 0:
        raise ValueError("simulations must be greater than zero")

    rng = get_rng(seed)
    counts = Counter(weighted_pick(table, rng).name for _ in range(simulations))
    return {name: counts.get(name, 0) for name in table.names()}


def drop_rates(table: LootTable) -> dict:
    total = table.total_weight
    return {c.name: c.weight / total for c in table.categories}
