"""
Reaction domain entity.
Represents a single free-text reaction submitted by a visitor.
"""
import secrets
import string
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional


UNKNOWN = "unknown"
TRUNCATION_MARKER = "..."

_BASE36_ALPHABET = string.digits + string.ascii_lowercase


def to_base36(value: int) -> str:
    """Encode a non-negative integer in lowercase base 36."""
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def generate_reaction_id() -> str:
    """
    Build a record id from the current epoch milliseconds plus 9 random chars.

    Collisions are improbable but not impossible.
    """
    time_part = to_base36(int(time.time() * 1000))
    random_part = "".join(secrets.choice(_BASE36_ALPHABET) for _ in range(9))
    return time_part + random_part


def utc_now_iso() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_reaction_text(text: str, max_length: int = 1000) -> str:
    """
    Trim whitespace and cap the length.

    Text longer than max_length keeps its first max_length characters
    followed by the truncation marker.
    """
    trimmed = text.strip()
    if len(trimmed) > max_length:
        return trimmed[:max_length] + TRUNCATION_MARKER
    return trimmed


@dataclass(frozen=True)
class ReactionRecord:
    """
    Reaction domain entity.

    Immutable once created; only removed by eviction from the buffer.
    """
    id: str
    reaction: str
    timestamp: str
    saved_at: str
    ip: str = UNKNOWN
    user_agent: str = UNKNOWN
    referer: str = UNKNOWN

    @classmethod
    def create(
        cls,
        reaction: str,
        timestamp: Optional[str] = None,
        ip: Optional[str] = None,
        user_agent: Optional[str] = None,
        referer: Optional[str] = None
    ) -> 'ReactionRecord':
        """
        Create a new reaction record stamped with the server capture time.

        Args:
            reaction: Already normalized reaction text
            timestamp: Client-supplied timestamp, server time when absent
            ip: Caller address
            user_agent: Caller user agent
            referer: Page the reaction came from

        Returns:
            New ReactionRecord instance
        """
        saved_at = utc_now_iso()
        return cls(
            id=generate_reaction_id(),
            reaction=reaction,
            timestamp=timestamp or saved_at,
            saved_at=saved_at,
            ip=ip or UNKNOWN,
            user_agent=user_agent or UNKNOWN,
            referer=referer or UNKNOWN
        )

    def preview(self, length: int = 50) -> str:
        if len(self.reaction) > length:
            return self.reaction[:length] + TRUNCATION_MARKER
        return self.reaction

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the public camelCase field names."""
        return {
            "id": self.id,
            "reaction": self.reaction,
            "timestamp": self.timestamp,
            "savedAt": self.saved_at,
            "ip": self.ip,
            "userAgent": self.user_agent,
            "referer": self.referer
        }
