"""
Tests for wildcard-aware role matching.
"""

import pytest

from gatekeeper.authz import (
    RoleIdentifier,
    WhitelistEntry,
    match,
    match_entries,
    parse_whitelist,
    role_matches,
)
from gatekeeper.errors import MalformedRoleError


class TestRoleMatches:
    """Test the single role/entry predicate"""

    def test_exact_match(self):
        assert role_matches(RoleIdentifier("org", "role"), WhitelistEntry("org", "role"))

    def test_org_type_mismatch(self):
        assert not role_matches(RoleIdentifier("org", "role"), WhitelistEntry("other", "role"))

    def test_org_role_mismatch(self):
        assert not role_matches(RoleIdentifier("org", "viewer"), WhitelistEntry("org", "admin"))

    def test_whitelist_org_type_wildcard(self):
        assert role_matches(RoleIdentifier("foo", "admin"), WhitelistEntry("*", "admin"))

    def test_user_org_type_wildcard_is_not_honoured(self):
        """A '*' org-type on the user side only matches literally"""
        assert not role_matches(RoleIdentifier("*", "admin"), WhitelistEntry("foo", "admin"))

    def test_whitelist_role_wildcard(self):
        assert role_matches(RoleIdentifier("org", "anything"), WhitelistEntry("org", "*"))

    def test_user_role_wildcard(self):
        assert role_matches(RoleIdentifier("foo", "*"), WhitelistEntry("*", "admin"))

    def test_matching_is_case_sensitive(self):
        assert not role_matches(RoleIdentifier("Org", "role"), WhitelistEntry("org", "role"))


class TestMatch:
    """Test matching a role set against a whitelist"""

    def test_returns_authorized_roles_in_user_order(self):
        user_roles = ["b:admin", "a:viewer", "c:admin"]
        result = match(user_roles, ["*:admin"])
        assert result == ["b:admin", "c:admin"]

    def test_role_matching_several_entries_is_returned_once(self):
        result = match(["org:admin"], ["org:admin", "org:*", "*:admin"])
        assert result == ["org:admin"]

    def test_no_deduplication_of_user_roles(self):
        result = match(["org:admin", "org:admin"], ["org:*"])
        assert result == ["org:admin", "org:admin"]

    def test_empty_whitelist_matches_nothing(self):
        assert match(["org:admin"], []) == []

    def test_empty_user_roles(self):
        assert match([], ["*:*"]) == []

    def test_wildcard_grid(self):
        whitelist = ["*:admin"]
        assert match(["foo:admin"], whitelist) == ["foo:admin"]
        assert match(["foo:*"], whitelist) == ["foo:*"]
        assert match(["foo:viewer"], whitelist) == []

    @pytest.mark.parametrize("entry", ["org", "org:", ":role", "a:b:c", ""])
    def test_malformed_whitelist_entry_never_matches(self, entry):
        assert match(["org:role"], [entry]) == []

    def test_malformed_entry_does_not_block_valid_entries(self):
        result = match(["acme:admin", "ops:viewer"], ["ops:", "acme:admin", "a:b:c"])
        assert result == ["acme:admin"]

    def test_malformed_user_role_raises(self):
        with pytest.raises(MalformedRoleError):
            match(["broken"], ["*:*"])


class TestParseWhitelist:
    """Test entry-by-entry whitelist parsing"""

    def test_splits_parsed_and_rejected(self):
        entries, rejected = parse_whitelist(["acme:admin", "ops:", "", "*:*"])
        assert entries == [WhitelistEntry("acme", "admin"), WhitelistEntry("*", "*")]
        assert rejected == ["ops:", ""]

    def test_non_string_entry_is_rejected(self):
        entries, rejected = parse_whitelist([42])
        assert entries == []
        assert rejected == [42]

    def test_match_entries(self):
        entries = [WhitelistEntry("*", "admin")]
        assert match_entries(["a:admin", "b:viewer"], entries) == ["a:admin"]


class TestWhitelistEntry:
    """Test whitelist item normalization"""

    def test_string_passes_through(self):
        assert WhitelistEntry.normalize("org:role") == "org:role"

    def test_mapping(self):
        item = {"organizationType": "org", "role": "role"}
        assert WhitelistEntry.normalize(item) == "org:role"

    def test_pair(self):
        assert WhitelistEntry.normalize(("org", "*")) == "org:*"

    def test_entry_object(self):
        assert WhitelistEntry.normalize(WhitelistEntry("*", "admin")) == "*:admin"

    def test_mapping_without_role_yields_malformed_entry(self):
        normalized = WhitelistEntry.normalize({"organizationType": "org"})
        assert normalized == "org:"
        with pytest.raises(MalformedRoleError):
            WhitelistEntry.parse(normalized)

    def test_parse_round_trip(self):
        entry = WhitelistEntry.parse("*:admin")
        assert entry == WhitelistEntry("*", "admin")
        assert str(entry) == "*:admin"

    def test_role_identifier_defaults_to_wildcard_role(self):
        assert str(RoleIdentifier("org")) == "org:*"
