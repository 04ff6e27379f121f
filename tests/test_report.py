from splitledger.models import Balance, Settlement
from splitledger.services.report import format_balances, format_settlement_line, format_settlements


def test_format_balances_with_names():
    balances = [Balance("u1", 2000), Balance("u2", -1000), Balance("u3", 0)]
    names = {"u1": "Alice", "u2": "Bob"}

    text = format_balances(balances, names, symbol="$")

    assert "Alice: owed $20.00" in text
    assert "Bob: owes $10.00" in text
    assert "u3: settled up" in text


def test_format_settlements():
    settlement = Settlement(from_participant="bob", to_participant="alice", amount=1050)

    assert format_settlement_line(settlement, symbol="$") == "bob → alice: $10.50"
    assert "bob → alice: $10.50" in format_settlements([settlement], symbol="$")


def test_format_empty_reports():
    assert format_balances([]) == "No expenses yet."
    assert format_settlements([]) == "Everyone is settled up! No payments needed."
