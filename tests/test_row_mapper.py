import pytest

from statement_sorter import CanonicalTransaction, Profile, map_row, map_rows


def test_yourbank_row_mapping():
    row = ["3/4/2024", "1500.00", "*", "", "Payroll  Deposit"]
    assert map_row(Profile.YOURBANK_NO_HEADER_5COLS, row, 7) == CanonicalTransaction(
        idx=7, date="2024-03-04", amount=1500.0, description="PAYROLL DEPOSIT"
    )


@pytest.mark.parametrize("profile", [Profile.USBANK_WITH_HEADERS, Profile.USBANK_NO_HEADER_BODY])
def test_usbank_row_mapping_joins_name_and_memo(profile):
    row = ["2024-03-04", "DEBIT", "Whole Foods Market", "#10234", "($82.15)"]
    assert map_row(profile, row) == CanonicalTransaction(
        idx=0, date="2024-03-04", amount=-82.15, description="WHOLE FOODS MARKET #10234"
    )


def test_usbank_row_with_empty_memo_has_no_trailing_space():
    row = ["2024-03-04", "DEBIT", "ACME", "", "-900.00"]
    assert map_row(Profile.USBANK_NO_HEADER_BODY, row).description == "ACME"


def test_unknown_profile_guesses_columns():
    row = ["01-02-2024", "-3.50", "Corner", "Store", "card 9911"]
    assert map_row(Profile.UNKNOWN, row) == CanonicalTransaction(
        idx=0, date="01-02-2024", amount=-3.5, description="CORNER STORE"
    )


def test_short_rows_degrade_to_defaults():
    assert map_row(Profile.YOURBANK_NO_HEADER_5COLS, ["3/4/2024"]) == CanonicalTransaction(
        idx=0, date="2024-03-04", amount=0.0, description=""
    )
    assert map_row(Profile.UNKNOWN, []) == CanonicalTransaction(
        idx=0, date="", amount=0.0, description=""
    )


def test_map_rows_preserves_order_and_assigns_indices():
    rows = [
        ["3/4/2024", "-1", "*", "", "A"],
        ["3/5/2024", "-2", "*", "", "B"],
        ["3/6/2024", "-3", "*", "", "C"],
    ]
    out = map_rows(Profile.YOURBANK_NO_HEADER_5COLS, rows)
    assert [(t.idx, t.description, t.amount) for t in out] == [
        (0, "A", -1.0),
        (1, "B", -2.0),
        (2, "C", -3.0),
    ]


def test_map_rows_accepts_profile_tag_strings():
    out = map_rows("USBank_NoHeaderBody", [["2024-01-01", "X", "N", "M", "1"]])
    assert out[0].amount == 1.0
