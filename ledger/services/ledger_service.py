"""
Ledger orchestration — simulated loading and demo resets.

The store itself is synchronous; any delay is awaited here before the
store is touched.
"""
import asyncio
import logging
from ledger.repository.store import TransactionStore
from seed_data import load_seed_data

logger = logging.getLogger(__name__)


async def initialize_sample_data(store: TransactionStore, delay_seconds: float = 1.0) -> None:
    """
    Populate an empty store with the sample transactions after a delay.

    The loading flag is raised for the duration of the delay. A store that
    already holds transactions is left as it is.
    """
    store.set_loading(True)
    try:
        await asyncio.sleep(delay_seconds)
        if len(store) == 0:
            ids = load_seed_data(store)
            logger.info("Loaded %d sample transactions", len(ids))
    finally:
        store.set_loading(False)


def reset_to_sample_data(store: TransactionStore) -> list[str]:
    """Drop every transaction and reload the samples."""
    store.clear_all()
    ids = load_seed_data(store)
    logger.info("Ledger reset to %d sample transactions", len(ids))
    return ids
