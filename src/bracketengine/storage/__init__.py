from bracketengine.storage.loader import load_data, reset_data, save_data
from bracketengine.storage.local_store import JsonFileStore
from bracketengine.storage.remote_source import RemoteSource

__all__ = [
    "JsonFileStore",
    "RemoteSource",
    "load_data",
    "save_data",
    "reset_data",
]
