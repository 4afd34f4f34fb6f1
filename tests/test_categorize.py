import pytest

from statement_sorter import (
    INCOME,
    UNCATEGORIZED,
    categorize_transactions,
    ordered_categories,
    summarize,
)
from statement_sorter.categorize import numbered_rows, sorted_keywords
from tests.helpers.factories import BASE_TABLE, tx


def test_positive_amounts_are_income_regardless_of_keywords():
    groups = categorize_transactions(
        [tx(0, "STARBUCKS REFUND", amount=4.75), tx(1, "SHELL", amount=0.01)], BASE_TABLE
    )
    assert list(groups) == [INCOME]
    assert [t.idx for t in groups[INCOME]] == [0, 1]


def test_zero_amount_is_not_income():
    groups = categorize_transactions([tx(0, "MYSTERY", amount=0.0)], BASE_TABLE)
    assert list(groups) == [UNCATEGORIZED]


def test_longest_keyword_wins():
    groups = categorize_transactions([tx(0, "WHOLE FOODS MARKET 123")], BASE_TABLE)
    assert list(groups) == ["Groceries"]

    groups = categorize_transactions([tx(0, "HAPPY FOODS TRUCK")], BASE_TABLE)
    assert list(groups) == ["Dining"]


def test_keywords_match_whole_words_only():
    groups = categorize_transactions([tx(0, "PARENTS GIFT"), tx(1, "SHELLFISH SHACK")], BASE_TABLE)
    assert list(groups) == [UNCATEGORIZED]


def test_match_runs_on_strictly_cleaned_description():
    groups = categorize_transactions([tx(0, "STAR-BUCKS #12"), tx(1, "STARBUCKS#12")], BASE_TABLE)
    assert [t.description for t in groups["Coffee"]] == ["STARBUCKS 12"]
    assert [t.description for t in groups[UNCATEGORIZED]] == ["STARBUCKS12"]


def test_descriptions_are_recleaned_in_output():
    groups = categorize_transactions([tx(0, "ACME - COFFEE, INC.")], {})
    assert groups[UNCATEGORIZED][0].description == "ACME COFFEE INC"


def test_equal_length_keywords_break_ties_lexically():
    table = {"BETA": "Second", "ALFA": "First"}
    groups = categorize_transactions([tx(0, "BETA ALFA")], table)
    assert list(groups) == ["First"]
    assert sorted_keywords(["AB", "ABC", "AA", "B"]) == ["ABC", "AA", "AB", "B"]


def test_keywords_are_escaped():
    groups = categorize_transactions([tx(0, "AXT STORE")], {"A.T": "Nope"})
    assert list(groups) == [UNCATEGORIZED]


def test_blank_keywords_never_match():
    table = {"": "Everything", "   ": "Everything", " shell ": "Gas"}
    groups = categorize_transactions([tx(0, "ACME"), tx(1, "SHELL OIL")], table)
    assert {c: [t.idx for t in items] for c, items in groups.items()} == {
        UNCATEGORIZED: [0],
        "Gas": [1],
    }


def test_groups_preserve_input_order():
    items = [tx(i, d) for i, d in enumerate(["RENT MAY", "SHELL 1", "RENT JUNE", "SHELL 2"])]
    groups = categorize_transactions(items, BASE_TABLE)
    assert [t.idx for t in groups["Housing"]] == [0, 2]
    assert [t.idx for t in groups["Gas"]] == [1, 3]


def test_table_is_not_mutated():
    table = dict(BASE_TABLE)
    categorize_transactions([tx(0, "RENT")], table)
    assert table == BASE_TABLE


def test_ordered_categories_puts_uncategorized_last():
    groups = {UNCATEGORIZED: [], "Gas": [], INCOME: [], "Coffee": []}
    assert ordered_categories(groups) == ["Coffee", "Gas", INCOME, UNCATEGORIZED]


def test_numbered_rows_follow_display_order():
    groups = {UNCATEGORIZED: [tx(0, "X")], "Gas": [tx(1, "SHELL"), tx(2, "SHELL")]}
    assert [(n, c, t.idx) for n, c, t in numbered_rows(groups)] == [
        (1, "Gas", 1),
        (2, "Gas", 2),
        (3, UNCATEGORIZED, 0),
    ]


def test_summarize_totals_and_subtotals():
    groups = {
        INCOME: [tx(0, "PAY", amount=1500.0)],
        "Gas": [tx(1, "SHELL", amount=-40.0), tx(2, "SHELL", amount=-10.5)],
        UNCATEGORIZED: [tx(3, "ZERO", amount=0.0)],
    }
    summary = summarize(groups)
    assert summary.total_income == pytest.approx(1500.0)
    assert summary.total_expenses == pytest.approx(-50.5)
    assert summary.net == pytest.approx(1449.5)
    assert summary.subtotals == {INCOME: 1500.0, "Gas": -50.5, UNCATEGORIZED: 0.0}
