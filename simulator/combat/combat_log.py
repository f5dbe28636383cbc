"""
Combat log module for the simulator.

Collects the records reported while attacks are resolved, so that callers
and tests can inspect the sequence of effect activations.
"""

from collections.abc import Callable

from core.constants import RecordKind
from core.logging import log_debug
from core.utils import cprint, strip_markup
from pydantic import BaseModel, Field
from rich.padding import Padding


class CombatRecord(BaseModel):
    """A single entry of the combat log."""

    model_config = {"frozen": True}

    kind: RecordKind = Field(
        description="What happened.",
    )
    actor: str = Field(
        description="Name of the acting player.",
    )
    target: str | None = Field(
        default=None,
        description="Name of the player acted upon, if any.",
    )
    value: int | None = Field(
        default=None,
        description="Numeric outcome (damage, reflected damage, healing).",
    )
    message: str = Field(
        default="",
        description="Human-readable message, with rich markup.",
    )

    @property
    def plain(self) -> str:
        """Returns the message without markup."""
        return strip_markup(self.message)

    def __str__(self) -> str:
        return self.plain


RecordSink = Callable[[CombatRecord], None]


class CombatLog:
    """
    In-memory combat log.

    Keeps a finite history (capacity) and drops the oldest records once it is
    full. Its ``record`` method can be handed to a resolver as the sink.
    """

    def __init__(self, capacity: int = 1000) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._records: list[CombatRecord] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def record(self, entry: CombatRecord) -> None:
        """
        Adds a record to the log.

        Args:
            entry (CombatRecord): The record to store.

        """
        self._records.append(entry)
        # Enforce capacity (drop oldest)
        dropped = len(self._records) - self._capacity
        if dropped > 0:
            del self._records[0:dropped]
            log_debug(f"Combat log capacity exceeded, dropped {dropped} record(s).")

    def events(self) -> list[CombatRecord]:
        return list(self._records)

    def kinds(self) -> list[RecordKind]:
        """Returns the kind of every record, oldest first."""
        return [r.kind for r in self._records]

    def of_kind(self, *kinds: RecordKind) -> list[CombatRecord]:
        return [r for r in self._records if r.kind in kinds]

    def get_recent(self, n: int) -> list[CombatRecord]:
        if n <= 0:
            return []
        return self._records[-n:]

    def clear(self) -> None:
        self._records.clear()

    def print_records(self, padding: int = 0) -> None:
        """
        Prints every record through the rich console.

        Args:
            padding (int): Left padding of activation records. Defaults to 0.

        """
        for r in self._records:
            indent = padding + 2 if r.kind.is_activation else padding
            cprint(Padding(r.message, (0, indent)))

    def __len__(self) -> int:
        return len(self._records)
