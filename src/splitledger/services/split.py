from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Mapping, Optional, Sequence

from splitledger.config import get_settings
from splitledger.errors import InvalidInput, ValidationError
from splitledger.logging import get_logger
from splitledger.models import Expense, ParticipantId, ShareMap, SplitMethod

log = get_logger(__name__)


def split_equally(amount_cents: int, participants: Sequence[ParticipantId]) -> ShareMap:
    """Split ``amount_cents`` evenly; the last participant absorbs the remainder."""
    if amount_cents < 0:
        raise InvalidInput("amount_cents must be non-negative")
    if not participants:
        raise InvalidInput("Cannot split among zero participants")
    if len(set(participants)) != len(participants):
        raise InvalidInput("participants must not contain duplicates")

    n = len(participants)
    base_share, remainder = divmod(amount_cents, n)

    shares = {participant: base_share for participant in participants}
    shares[participants[-1]] += remainder
    return shares


def split_by_percentage(amount_cents: int, percentages: Mapping[ParticipantId, float]) -> ShareMap:
    """Split by percentage in mapping order.

    Every participant but the last gets ``amount * pct / 100`` rounded half
    away from zero. The last one gets whatever is left, so the shares
    always add up to ``amount_cents`` exactly.
    """
    total_percentage = sum(percentages.values())
    tolerance = get_settings().percentage_tolerance
    finite = all(math.isfinite(value) for value in percentages.values())
    if not finite or abs(total_percentage - 100) > tolerance:
        log.info("split.rejected", method=SplitMethod.PERCENTAGE.value, total_percentage=total_percentage)
        raise ValidationError(f"Percentages must sum to 100, got {total_percentage}")

    shares: ShareMap = {}
    allocated = 0
    participants = list(percentages)
    for participant in participants[:-1]:
        raw = Decimal(amount_cents) * Decimal(str(percentages[participant])) / Decimal(100)
        share = int(raw.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        shares[participant] = share
        allocated += share

    shares[participants[-1]] = amount_cents - allocated
    return shares


def split_by_exact_amounts(amount_cents: int, amounts: Mapping[ParticipantId, int]) -> Mapping[ParticipantId, int]:
    total = sum(amounts.values())
    if total != amount_cents:
        log.info("split.rejected", method=SplitMethod.EXACT.value, amount_cents=amount_cents, total=total)
        raise ValidationError(f"Exact amounts must sum to total ({amount_cents}), got {total}")
    return amounts


def split_amount(
    amount_cents: int,
    method: SplitMethod,
    participants: Sequence[ParticipantId],
    shares: Optional[Mapping[ParticipantId, float]] = None,
) -> ShareMap:
    method = SplitMethod(method)
    if method == SplitMethod.EQUAL:
        return split_equally(amount_cents, participants)

    if shares is None:
        raise InvalidInput(f"Shares required for {method.value} split")

    if method == SplitMethod.PERCENTAGE:
        return split_by_percentage(amount_cents, shares)
    return dict(split_by_exact_amounts(amount_cents, shares))


def build_expense(
    amount_cents: int,
    payer: ParticipantId,
    method: SplitMethod = SplitMethod.EQUAL,
    participants: Optional[Sequence[ParticipantId]] = None,
    shares: Optional[Mapping[ParticipantId, float]] = None,
    *,
    description: Optional[str] = None,
    currency: Optional[str] = None,
) -> Expense:
    if amount_cents <= 0:
        raise InvalidInput("Expense amount must be positive")

    method = SplitMethod(method)
    if participants is None:
        participants = list(shares) if shares is not None else []
    if shares is not None and set(shares) != set(participants):
        raise InvalidInput("shares must cover exactly the expense participants")

    split = split_amount(amount_cents, method, participants, shares)
    expense = Expense(
        amount=amount_cents,
        payer=payer,
        participants=tuple(participants),
        shares=split,
        method=method,
        description=description,
        currency=currency or get_settings().default_currency,
    )
    log.debug("expense.built", payer=payer, amount_cents=amount_cents, method=method.value)
    return expense
