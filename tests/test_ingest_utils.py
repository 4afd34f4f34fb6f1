from pathlib import Path

import pytest

from statement_sorter import EmptyInput, Profile
from statement_sorter.ingest import load_ctv_from_csv, tokenize_csv


def test_tokenize_handles_quotes_and_skips_blank_lines():
    text = 'a,"1,234.56",b\n\n   \nc,"say ""hi""",d\n'
    assert tokenize_csv(text) == [["a", "1,234.56", "b"], ["c", 'say "hi"', "d"]]


def test_tokenize_keeps_blank_lines_when_asked():
    rows = tokenize_csv("a,b\n   \nc,d\n", skip_empty_lines=False)
    assert rows == [["a", "b"], ["   "], ["c", "d"]]


@pytest.mark.parametrize(("preview", "expected"), [(1, [["a"]]), (0, []), (5, [["a"], ["b"]])])
def test_tokenize_preview_limits_rows(preview, expected):
    assert tokenize_csv("\na\nb\n", preview=preview) == expected


def test_load_from_csv_strips_bom(tmp_path: Path):
    path = tmp_path / "bom.csv"
    path.write_text("\ufeffDate,Transaction,Name,Memo,Amount\n2024-01-02,DEBIT,ALDI,,-3.00\n", encoding="utf-8")
    loaded = load_ctv_from_csv(path)
    assert loaded.profile is Profile.USBANK_WITH_HEADERS
    assert [t.description for t in loaded.transactions] == ["ALDI"]


def test_load_header_only_is_empty(tmp_path: Path):
    path = tmp_path / "header.csv"
    path.write_text("Date,Transaction,Name,Memo,Amount\n", encoding="utf-8")
    with pytest.raises(EmptyInput):
        load_ctv_from_csv(path)
