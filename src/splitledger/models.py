from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from splitledger.errors import InvalidInput, ValidationError

ParticipantId = str
ShareMap = dict[ParticipantId, int]


class SplitMethod(str, Enum):
    EQUAL = "equal"
    PERCENTAGE = "percentage"
    EXACT = "exact"


@dataclass(frozen=True, slots=True)
class Expense:
    """A recorded expense.

    ``shares`` is keyed by exactly the ``participants`` and sums to
    ``amount``; construction fails otherwise. The shares are stored as a
    read-only copy and take no part in hashing.
    """

    amount: int
    payer: ParticipantId
    participants: tuple[ParticipantId, ...]
    shares: Mapping[ParticipantId, int] = field(hash=False)
    method: SplitMethod = SplitMethod.EQUAL
    description: Optional[str] = None
    currency: Optional[str] = None

    def __post_init__(self) -> None:
        if self.amount <= 0:
            raise InvalidInput("Expense amount must be positive")
        if not self.participants:
            raise InvalidInput("Expense must have at least one participant")
        if set(self.shares) != set(self.participants):
            raise InvalidInput("shares must cover exactly the expense participants")
        total = sum(self.shares.values())
        if total != self.amount:
            raise ValidationError(f"Shares must sum to total ({self.amount}), got {total}")

        object.__setattr__(self, "participants", tuple(self.participants))
        object.__setattr__(self, "shares", MappingProxyType(dict(self.shares)))
        object.__setattr__(self, "method", SplitMethod(self.method))


@dataclass(frozen=True, slots=True)
class Balance:
    participant: ParticipantId
    net_cents: int


@dataclass(frozen=True, slots=True)
class Settlement:
    from_participant: ParticipantId
    to_participant: ParticipantId
    amount: int
