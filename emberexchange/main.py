import logging

from emberexchange.config import configure_logging, settings
from emberexchange.db import StoveRepository, init_db
from emberexchange.services.loot_service import default_engine, open_lootbox

logger = logging.getLogger(__name__)


class LootboxRuntime:
    """Wires the draw engine to the stove store for one process."""

    def __init__(self, db_path=None):
        self.db_path = db_path or settings.database_path
        self.repository = StoveRepository(self.db_path)
        self.engine = default_engine()

    def open(self, owner_id: int):
        return open_lootbox(owner_id, self.repository, self.engine)


def bootstrap(db_path=None) -> LootboxRuntime:
    configure_logging()
    init_db(db_path)
    runtime = LootboxRuntime(db_path)
    logger.info("EmberExchange lootbox runtime ready (db=%s)", runtime.db_path)
    return runtime
