from __future__ import annotations

from typing import Iterable, Mapping, Optional

from splitledger.config import get_settings
from splitledger.models import Balance, ParticipantId, Settlement
from splitledger.utils.money import format_cents


def display_name(participant: ParticipantId, names: Optional[Mapping[ParticipantId, str]] = None) -> str:
    if names and names.get(participant):
        return names[participant]
    return participant


def format_balance_line(
    balance: Balance,
    names: Optional[Mapping[ParticipantId, str]] = None,
    symbol: Optional[str] = None,
) -> str:
    symbol = symbol if symbol is not None else get_settings().currency_symbol
    name = display_name(balance.participant, names)
    amount = format_cents(abs(balance.net_cents), symbol)
    if balance.net_cents > 0:
        return f"{name}: owed {amount}"
    if balance.net_cents < 0:
        return f"{name}: owes {amount}"
    return f"{name}: settled up"


def format_settlement_line(
    settlement: Settlement,
    names: Optional[Mapping[ParticipantId, str]] = None,
    symbol: Optional[str] = None,
) -> str:
    symbol = symbol if symbol is not None else get_settings().currency_symbol
    payer = display_name(settlement.from_participant, names)
    payee = display_name(settlement.to_participant, names)
    return f"{payer} → {payee}: {format_cents(settlement.amount, symbol)}"


def format_balances(
    balances: Iterable[Balance],
    names: Optional[Mapping[ParticipantId, str]] = None,
    symbol: Optional[str] = None,
) -> str:
    lines = [format_balance_line(balance, names, symbol) for balance in balances]
    if not lines:
        return "No expenses yet."
    return "Group balances:\n" + "\n".join(lines)


def format_settlements(
    settlements: Iterable[Settlement],
    names: Optional[Mapping[ParticipantId, str]] = None,
    symbol: Optional[str] = None,
) -> str:
    lines = [format_settlement_line(settlement, names, symbol) for settlement in settlements]
    if not lines:
        return "Everyone is settled up! No payments needed."
    return "Suggested settlements:\n" + "\n".join(lines)
