from abc import ABC, abstractmethod
from typing import Tuple

from app.core.models.reaction import ReactionRecord


class ReactionRepositoryPort(ABC):
    @abstractmethod
    def append(self, record: ReactionRecord) -> int:
        """Store a record, returning how many old records were evicted."""
        pass

    @abstractmethod
    def snapshot(self) -> Tuple[ReactionRecord, ...]:
        """Return stored records, oldest first."""
        pass

    @abstractmethod
    def reset(self) -> int:
        """Remove every record and return how many were cleared."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of records currently held."""
        pass
