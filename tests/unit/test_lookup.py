"""Tests for lookup string classification."""

import pytest

from ec2ssh.core.lookup import (
    LookupKind,
    LookupQuery,
    classify_lookup,
    is_instance_id,
    is_ip_address,
)


class TestClassifyLookup:
    """Tests for classify_lookup."""

    @pytest.mark.parametrize(
        "lookup",
        ["10.0.0.12", "172.31.255.1", "192.168.0.1", "::1", "fe80::1ff:fe23:4567:890a"],
    )
    def test_ip_addresses_search_by_address(self, lookup: str) -> None:
        assert classify_lookup(lookup) == LookupQuery(LookupKind.ADDRESS, lookup)

    @pytest.mark.parametrize(
        "lookup",
        ["i-12abcdef", "i-0123456789abcdef0", "i-0123456789ABCDEF0", "i-1234567890abcdef1"],
    )
    def test_instance_ids_search_by_id(self, lookup: str) -> None:
        assert classify_lookup(lookup) == LookupQuery(LookupKind.INSTANCE_ID, lookup)

    @pytest.mark.parametrize(
        "lookup",
        [
            "web-1",
            "",
            "my-host.example.com",
            "i-1234567",
            "i-0123456789abcdef01",
            "i-12abcdeg",
            "10.0.0.256",
            "10.0.0",
            "i-12abcdef-old",
        ],
    )
    def test_other_strings_search_by_name(self, lookup: str) -> None:
        assert classify_lookup(lookup) == LookupQuery(LookupKind.NAME, lookup)

    def test_instance_id_is_matched_at_end_of_string(self) -> None:
        """The ID pattern is anchored at the end only."""
        query = classify_lookup("prod/i-12abcdef")

        assert query.kind is LookupKind.INSTANCE_ID
        assert query.value == "prod/i-12abcdef"

    def test_address_takes_precedence(self) -> None:
        assert classify_lookup("10.1.2.3").kind is LookupKind.ADDRESS


class TestPredicates:
    """Tests for the classification predicates."""

    def test_is_ip_address(self) -> None:
        assert is_ip_address("127.0.0.1")
        assert is_ip_address("2001:db8::1")
        assert not is_ip_address("web-1")
        assert not is_ip_address("i-12abcdef")

    def test_is_instance_id(self) -> None:
        assert is_instance_id("i-12abcdef")
        assert not is_instance_id("i-12abcde")
        assert not is_instance_id("web-1")
