"""Tests for the CSV period counter."""

import pytest

from app.services.dedup_counter import count_unique_periods, main

HEADER = "fin_year,month,district_code,district_name,persondays_of_central_liability_so_far\n"


def _write(tmp_path, body, name="data.csv"):
    path = tmp_path / name
    path.write_text(HEADER + body, encoding="utf-8")
    return path


def test_all_distinct_keys(tmp_path):
    path = _write(
        tmp_path,
        "2023-2024,Apr,601,Ariyalur,100\n"
        "2023-2024,May,601,Ariyalur,180\n"
        "2023-2024,Apr,602,Chennai,50\n",
    )

    report = count_unique_periods(path)

    assert report.total_rows == 3
    assert report.unique_keys == 3
    assert report.duplicates == 0


def test_repeated_keys_counted_once(tmp_path):
    path = _write(
        tmp_path,
        "2023-2024,Apr,601,Ariyalur,100\n"
        "2023-2024,Apr,601,Ariyalur,120\n"
        "2024-2025,Apr,601,Ariyalur,10\n"
        "2023-2024,Apr,601,Ariyalur,100\n",
    )

    report = count_unique_periods(path)

    assert report.total_rows == 4
    assert report.unique_keys == 2
    assert report.duplicates == 2


def test_blank_lines_skipped_and_empty_cells_kept(tmp_path):
    path = _write(
        tmp_path,
        "2023-2024,Apr,601,Ariyalur,100\n"
        "\n"
        "2023-2024,,601,Ariyalur,\n"
        "2023-2024,,601,Ariyalur,5\n",
    )

    report = count_unique_periods(path)

    assert report.total_rows == 3
    assert report.unique_keys == 2


def test_codes_compared_as_strings(tmp_path):
    path = _write(
        tmp_path,
        "2023-2024,Apr,0601,Ariyalur,1\n"
        "2023-2024,Apr,601,Ariyalur,1\n",
    )

    assert count_unique_periods(path).unique_keys == 2


def test_missing_key_column(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("fin_year,district_code\n2023-2024,601\n", encoding="utf-8")

    with pytest.raises(KeyError, match="month"):
        count_unique_periods(path)


def test_main_prints_counts(tmp_path, capsys):
    path = _write(
        tmp_path,
        "2023-2024,Apr,601,Ariyalur,100\n"
        "2023-2024,Apr,601,Ariyalur,100\n",
    )

    report = main([str(path)])

    out = capsys.readouterr().out
    assert "Total rows: 2" in out
    assert "Unique (fin_year, month, district_code): 1" in out
    assert report.unique_keys <= report.total_rows
