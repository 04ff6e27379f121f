from splitledger.models import Expense, SplitMethod
from splitledger.services.balances import balances_from_map, balances_to_map, calculate_balances


def _expense(amount, payer, shares):
    return Expense(
        amount=amount,
        payer=payer,
        participants=tuple(shares),
        shares=shares,
        method=SplitMethod.EQUAL,
    )


def test_calculate_balances_single_expense():
    expenses = [_expense(3000, "alice", {"alice": 1000, "bob": 1000, "charlie": 1000})]

    balances = balances_to_map(calculate_balances(expenses))

    assert balances == {"alice": 2000, "bob": -1000, "charlie": -1000}


def test_calculate_balances_multiple_payers():
    expenses = [
        _expense(3000, "alice", {"alice": 1000, "bob": 1000, "charlie": 1000}),
        _expense(1500, "bob", {"alice": 500, "bob": 500, "charlie": 500}),
    ]

    balances = balances_to_map(calculate_balances(expenses))

    assert balances == {"alice": 1500, "bob": 0, "charlie": -1500}


def test_calculate_balances_payer_not_participant():
    expenses = [_expense(1000, "alice", {"bob": 500, "charlie": 500})]

    balances = balances_to_map(calculate_balances(expenses))

    assert balances == {"alice": 1000, "bob": -500, "charlie": -500}


def test_calculate_balances_empty():
    assert calculate_balances([]) == []


def test_calculate_balances_sum_to_zero():
    expenses = [
        _expense(1001, "a", {"a": 333, "b": 333, "c": 335}),
        _expense(777, "b", {"c": 700, "d": 77}),
        _expense(5, "d", {"a": 5}),
        _expense(4200, "c", {"a": 1400, "b": 1400, "c": 1400}),
    ]

    balances = calculate_balances(expenses)

    assert sum(b.net_cents for b in balances) == 0
    assert {b.participant for b in balances} == {"a", "b", "c", "d"}


def test_balance_map_conversion():
    mapping = {"alice": 10, "bob": -10}
    assert balances_to_map(balances_from_map(mapping)) == mapping
