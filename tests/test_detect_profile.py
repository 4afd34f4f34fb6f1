from statement_sorter import Profile, detect_profile


def test_header_row_is_usbank_with_headers():
    assert detect_profile(["Date", "Transaction", "Name", "Memo", "Amount"]) == (
        Profile.USBANK_WITH_HEADERS
    )


def test_header_match_ignores_case_quotes_and_whitespace():
    row = [' "DATE" ', "transaction", "Name ", "'memo'", "AMOUNT", "extra"]
    assert detect_profile(row) == Profile.USBANK_WITH_HEADERS


def test_star_column_is_yourbank():
    assert detect_profile(["3/4/2024", "-12.00", "*", "", "COFFEE SHOP"]) == (
        Profile.YOURBANK_NO_HEADER_5COLS
    )
    assert detect_profile(["03/04/2024", "-12.00", "*"]) == Profile.YOURBANK_NO_HEADER_5COLS


def test_us_date_without_star_is_unknown():
    assert detect_profile(["3/4/2024", "-12.00", "x", "", "COFFEE"]) == Profile.UNKNOWN


def test_iso_date_with_five_cells_is_usbank_body():
    assert detect_profile(["2024-03-04", "DEBIT", "ACME", "RENT", "-900.00"]) == (
        Profile.USBANK_NO_HEADER_BODY
    )


def test_iso_date_needs_five_cells():
    assert detect_profile(["2024-03-04", "DEBIT", "ACME", "RENT"]) == Profile.UNKNOWN


def test_short_rows_are_unknown():
    assert detect_profile([]) == Profile.UNKNOWN
    assert detect_profile(["3/4/2024", "*"]) == Profile.UNKNOWN


def test_none_cells_are_tolerated():
    assert detect_profile(["3/4/2024", None, "*", None, None]) == (
        Profile.YOURBANK_NO_HEADER_5COLS
    )


def test_profile_values_match_tag_names():
    assert Profile.USBANK_NO_HEADER_BODY.value == "USBank_NoHeaderBody"
    assert str(Profile.YOURBANK_NO_HEADER_5COLS) == "YourBank_NoHeader_5Cols"
