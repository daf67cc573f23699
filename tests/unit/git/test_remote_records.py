"""Tests for parsing `git remote -v` output and picking the fetch URI."""
from __future__ import annotations

SAMPLE = (
    "backup\t/srv/mirror/lib.git (fetch)\n"
    "backup\t/srv/mirror/lib.git (push)\n"
    "origin\thttps://example.com/lib.git (fetch)\n"
    "origin\tgit@example.com:org/lib.git (push)\n"
)


class TestParseRemoteRecords:
    def test_parses_every_record(self) -> None:
        from vendorkit.core.git.remote import RemoteRecord, parse_remote_records

        records = parse_remote_records(SAMPLE)

        assert len(records) == 4
        assert records[2] == RemoteRecord("origin", "https://example.com/lib.git", "fetch")

    def test_ignores_malformed_lines(self) -> None:
        from vendorkit.core.git.remote import parse_remote_records

        assert parse_remote_records("warning: something odd\norigin only-two-fields\n") == []


class TestSelectFetchUri:
    def test_preferred_remote_wins(self) -> None:
        from vendorkit.core.git.remote import parse_remote_records, select_fetch_uri

        assert select_fetch_uri(parse_remote_records(SAMPLE), "origin") == "https://example.com/lib.git"

    def test_first_fetch_record_without_preference(self) -> None:
        from vendorkit.core.git.remote import parse_remote_records, select_fetch_uri

        assert select_fetch_uri(parse_remote_records(SAMPLE)) == "/srv/mirror/lib.git"

    def test_missing_preferred_falls_back_to_first(self) -> None:
        from vendorkit.core.git.remote import parse_remote_records, select_fetch_uri

        assert select_fetch_uri(parse_remote_records(SAMPLE), "upstream") == "/srv/mirror/lib.git"

    def test_push_only_records_yield_none(self) -> None:
        from vendorkit.core.git.remote import parse_remote_records, select_fetch_uri

        records = parse_remote_records("origin\thttps://example.com/lib.git (push)\n")

        assert select_fetch_uri(records, "origin") is None
