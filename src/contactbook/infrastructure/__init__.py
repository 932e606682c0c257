"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.memory_collection import InMemoryRecordCollection
from contactbook.infrastructure.seed import get_default_seed_path, load_seed

__all__ = [
    "InMemoryRecordCollection",
    "get_default_seed_path",
    "load_seed",
]
