import threading
from typing import List, Tuple

from app.core.models.reaction import ReactionRecord
from app.core.ports.reaction_repository import ReactionRepositoryPort
from app.infrastructure.logging.log_config import get_logger
from app.infrastructure.logging.log_decorators import log_operation, op_config


class MemoryReactionRepository(ReactionRepositoryPort):
    """
    Bounded in-process reaction buffer.

    Holds at most `capacity` records in insertion order. Appending past
    capacity evicts the oldest records. State lives as long as the process
    and is bounded per process instance only.
    """

    def __init__(self, capacity: int = 500):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._records: List[ReactionRecord] = []
        self._lock = threading.Lock()
        self.logger = get_logger(self.__class__.__name__)

    def append(self, record: ReactionRecord) -> int:
        # Append and trim under one lock so the bound holds after every call
        with self._lock:
            self._records.append(record)
            evicted = len(self._records) - self.capacity
            if evicted > 0:
                del self._records[:evicted]
            size = len(self._records)

        if evicted > 0:
            self.logger.info(f"Reactions buffer trimmed to {size} entries", extra={
                "extra_fields": {"evicted": evicted, "capacity": self.capacity}
            })
            return evicted
        return 0

    @log_operation("reaction_snapshot", **op_config("DEBUG", args=False))
    def snapshot(self) -> Tuple[ReactionRecord, ...]:
        with self._lock:
            return tuple(self._records)

    @log_operation("reaction_reset", **op_config("WARNING", args=False))
    def reset(self) -> int:
        with self._lock:
            cleared = len(self._records)
            self._records = []
        return cleared

    def count(self) -> int:
        with self._lock:
            return len(self._records)
