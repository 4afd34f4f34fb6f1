from statement_sorter import INCOME, UNCATEGORIZED, reassign
from tests.helpers.factories import tx


def _ids(groups):
    return {category: [t.idx for t in items] for category, items in groups.items()}


def test_moves_selection_into_new_group_and_drops_empty_source():
    a = tx(0, "ACME COFFEE SHOP")
    groups = {UNCATEGORIZED: [a]}
    out = reassign(groups, [a], "Coffee")
    assert _ids(out) == {"Coffee": [0]}
    assert _ids(groups) == {UNCATEGORIZED: [0]}


def test_appends_to_existing_target_after_current_members():
    a, b, c = tx(0, "A1"), tx(1, "B1"), tx(2, "C1")
    groups = {"Coffee": [a], UNCATEGORIZED: [b, c]}
    out = reassign(groups, [c, b], "Coffee")
    assert _ids(out) == {"Coffee": [0, 2, 1]}


def test_selected_transaction_already_in_target_is_not_duplicated():
    a, b = tx(0, "A1"), tx(1, "B1")
    groups = {"Coffee": [a], UNCATEGORIZED: [b]}
    out = reassign(groups, [a, b], "Coffee")
    assert _ids(out) == {"Coffee": [0, 1]}


def test_identity_by_index_leaves_lookalikes_in_place():
    first = tx(0, "ACME COFFEE", date="2024-03-04")
    twin = tx(1, "ACME COFFEE", date="2024-03-04")
    groups = {UNCATEGORIZED: [first, twin]}
    out = reassign(groups, [first], "Coffee")
    assert _ids(out) == {UNCATEGORIZED: [1], "Coffee": [0]}


def test_identity_by_content_moves_lookalikes_together():
    first = tx(0, "ACME COFFEE", date="2024-03-04")
    twin = tx(1, "ACME COFFEE", date="2024-03-04")
    other = tx(2, "ACME COFFEE", date="2024-03-05")
    groups = {UNCATEGORIZED: [first, twin, other]}
    out = reassign(groups, [first], "Coffee", by_content=True)
    assert _ids(out) == {UNCATEGORIZED: [2], "Coffee": [0, 1]}


def test_every_transaction_stays_in_exactly_one_group():
    items = [tx(i, f"ITEM {i}", amount=(5.0 if i == 3 else -1.0)) for i in range(6)]
    groups = {INCOME: [items[3]], UNCATEGORIZED: [items[0], items[1], items[2]], "Gas": items[4:]}
    out = reassign(groups, [items[1], items[4]], "Misc")
    seen = sorted(t.idx for members in out.values() for t in members)
    assert seen == list(range(6))
