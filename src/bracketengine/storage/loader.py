"""Session-level loading and saving of the tournament.

A local copy always wins; the remote snapshot is only fetched when there is
no usable local copy.
"""

from typing import Optional

from bracketengine.exceptions import RemoteSourceException
from bracketengine.models.tournament import Tournament
from bracketengine.storage.local_store import JsonFileStore
from bracketengine.storage.remote_source import RemoteSource
from bracketengine.utils import setup_logger

logger = setup_logger(__name__)


def load_data(store: JsonFileStore, remote: Optional[RemoteSource] = None) -> Tournament:
    """Load the tournament for this session.

    Args:
        store: Local persistence; a corrupted copy is discarded silently
        remote: Fallback snapshot source, required when nothing is stored

    Returns:
        The normalized tournament

    Raises:
        RemoteSourceException: If the remote snapshot cannot be fetched or
            does not describe a tournament
        ValueError: If there is no local copy and no remote source
    """
    data = store.load()
    if data is not None:
        try:
            tournament = Tournament.from_dict(data)
        except (KeyError, TypeError, AttributeError) as e:
            logger.warning(
                f"Discarding malformed tournament file {store.path}: "
                f"{type(e).__name__}: {e}"
            )
            store.clear()
        else:
            logger.info(f"Using local tournament data from {store.path}")
            return tournament

    if remote is None:
        raise ValueError("No local tournament data and no remote source configured")

    logger.info(f"No local tournament data, falling back to {remote.url}")
    try:
        return Tournament.from_dict(remote.fetch())
    except (KeyError, TypeError, AttributeError) as e:
        raise RemoteSourceException(
            f"data.json invalide : {type(e).__name__}: {e}"
        ) from e


def save_data(store: JsonFileStore, tournament: Tournament) -> None:
    """Persist the tournament after a successful mutation."""
    store.save(tournament.to_dict())


def reset_data(store: JsonFileStore) -> None:
    """Drop the local copy so the next load uses the remote snapshot."""
    store.clear()
