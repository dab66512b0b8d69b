"""
Tests for the movie database reader.
"""

import pytest

from movie_match.loader import DatabaseLoadError, parse_records, read_records, split_record


class TestSplitRecord:
    def test_title_and_cast(self):
        assert split_record("Alien (1979)/Weaver, Sigourney/Hurt, John\n") == [
            "Alien (1979)",
            "Weaver, Sigourney",
            "Hurt, John",
        ]

    def test_crlf_and_empty_fields(self):
        assert split_record("M (2000)//A/\r\n") == ["M (2000)", "A"]

    def test_custom_delimiter(self):
        assert split_record("M (2000)|A/B|C", "|") == ["M (2000)", "A/B", "C"]

    def test_blank(self):
        assert split_record("\n") == []


class TestReadRecords:
    def test_iterable_source(self, chain_records):
        records = read_records(chain_records)

        assert len(records) == 3
        assert records[0] == ["M1 (2001)", "A", "B"]

    def test_file_source(self, database_file):
        assert read_records(database_file) == read_records(str(database_file))
        assert read_records(database_file)[2] == ["M3 (2003)", "D", "E"]

    def test_blank_lines_skipped(self):
        assert list(parse_records(["", "M (2000)/A", "\n", "N (2001)"])) == [
            ["M (2000)", "A"],
            ["N (2001)"],
        ]

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatabaseLoadError, match="cannot read movie database"):
            read_records(tmp_path / "missing.txt")

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "latin1.txt"
        path.write_bytes("Amélie (2001)/Tautou, Audrey\n".encode("latin-1"))

        with pytest.raises(DatabaseLoadError):
            read_records(path)
