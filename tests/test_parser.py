import pytest

from churnpipe.parser import ParseResult, Solicitud, parse_csv

HEADER = "customerID,a,b,c,d,tenure," + ",".join(f"x{i}" for i in range(12)) + ",MonthlyCharges,TotalCharges,Churn"


def make_row(cid, tenure, monthly, total, churn):
    return ",".join([cid] + ["f"] * 4 + [tenure] + ["g"] * 12 + [monthly, total, churn])


def write_csv(tmp_path, rows, newline="\n"):
    path = tmp_path / "data.csv"
    path.write_bytes((newline.join([HEADER] + rows) + newline).encode())
    return path


def test_fields_are_read(tmp_path):
    rows = [make_row("ID-A", "5", "29.85", "149.25", "No"), make_row("ID-B", "34", "56.95", "1889.5", "Yes")]
    result = parse_csv(write_csv(tmp_path, rows))
    assert isinstance(result, ParseResult)
    assert result.total_loaded == len(rows)
    assert result.total_nulls == 0
    assert result.records[0] == Solicitud("ID-A", 5, 29.85, 149.25, "No")
    assert result.records[1] == Solicitud("ID-B", 34, 56.95, 1889.5, "Yes")


def test_blank_total_charges_counts_as_null(tmp_path):
    rows = [make_row("ID-A", "0", "52.55", " ", "No"), make_row("ID-B", "3", "20.0", "60.0", "No")]
    result = parse_csv(write_csv(tmp_path, rows))
    assert result.records[0].total_charges == 0.0
    assert result.total_nulls == 1
    assert result.total_loaded == 2


def test_unparsable_total_counts_as_null(tmp_path):
    rows = [make_row("ID-A", "1", "10.0", "abc", "No")]
    result = parse_csv(write_csv(tmp_path, rows))
    assert result.records[0].total_charges == 0.0
    assert result.total_nulls == 1


def test_crlf_line_endings_are_stripped(tmp_path):
    rows = [make_row("ID-A", "7", "10.5", "73.5", "No")]
    result = parse_csv(write_csv(tmp_path, rows, newline="\r\n"))
    assert result.records[0].churn == "No"


def test_short_rows_are_skipped(tmp_path):
    rows = ["ID-X,1,2,3", "", make_row("ID-A", "2", "1.0", "2.0", "Yes")]
    result = parse_csv(write_csv(tmp_path, rows))
    assert [r.customer_id for r in result.records] == ["ID-A"]


def test_trailing_empty_field_makes_row_too_short(tmp_path):
    rows = [make_row("ID-A", "2", "1.0", "2.0", "")]
    result = parse_csv(write_csv(tmp_path, rows))
    assert result.records == []


def test_bad_numbers_default_to_zero(tmp_path):
    rows = [make_row("ID-A", "abc", "n/a", "5.0", "No")]
    record = parse_csv(write_csv(tmp_path, rows)).records[0]
    assert record.tenure == 0
    assert record.monthly_charges == 0.0


def test_numeric_prefix_is_used(tmp_path):
    rows = [make_row("ID-A", "12abc", " 7.5kb", "5.0", "No")]
    record = parse_csv(write_csv(tmp_path, rows)).records[0]
    assert record.tenure == 12
    assert record.monthly_charges == 7.5


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_csv(tmp_path / "absent.csv")


def test_empty_file_raises(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")
    with pytest.raises(ValueError):
        parse_csv(path)