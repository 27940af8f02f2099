"""
Tests for token decoding and claims extraction.
"""

import jwt
import pytest

from gatekeeper.auth import ClaimsExtractor, claim_text, claims_path, decode_jwt_payload
from gatekeeper.core import GatekeeperConfig
from gatekeeper.errors import (
    ClaimsError,
    MalformedRoleError,
    MissingClaimsError,
    MissingOrgTypeError,
    TokenDecodeError,
)

SECRET = "gatekeeper-test-secret-0123456789abcdef"


@pytest.fixture
def extractor():
    """Extractor with default property names and no root path"""
    return ClaimsExtractor()


class TestClaimsExtractor:
    """Test projection of claims into role identifiers"""

    def test_single_claim_payload(self, extractor):
        result = extractor.extract({"organizationType": "org", "role": "admin"})
        assert result.success
        assert result.roles == ["org:admin"]

    def test_missing_role_yields_wildcard(self, extractor):
        result = extractor.extract({"organizationType": "org"})
        assert result.roles == ["org:*"]

    @pytest.mark.parametrize("role", ["", None, 0])
    def test_falsy_role_yields_wildcard(self, extractor, role):
        result = extractor.extract({"organizationType": "org", "role": role})
        assert result.roles == ["org:*"]

    def test_root_claims_list(self):
        extractor = ClaimsExtractor(root_claims_property="claims")
        payload = {
            "sub": "user-1",
            "claims": [
                {"organizationType": "a", "role": "admin"},
                {"organizationType": "b"},
            ],
        }
        assert extractor.extract(payload).roles == ["a:admin", "b:*"]

    def test_root_claims_single_mapping(self):
        extractor = ClaimsExtractor(root_claims_property="claims")
        payload = {"claims": {"organizationType": "a", "role": "viewer"}}
        assert extractor.extract(payload).roles == ["a:viewer"]

    def test_nested_root_path(self):
        extractor = ClaimsExtractor(root_claims_property=("app", "orgs"))
        payload = {"app": {"orgs": [{"organizationType": "a", "role": "x"}]}}
        assert extractor.extract(payload).roles == ["a:x"]

    def test_empty_claims_list_is_success(self):
        extractor = ClaimsExtractor(root_claims_property="claims")
        result = extractor.extract({"claims": []})
        assert result.success
        assert result.roles == []

    def test_custom_property_names(self):
        extractor = ClaimsExtractor(org_type_prop="orgType", org_role_prop="orgRole")
        result = extractor.extract([{"orgType": "a", "orgRole": "x"}, {"orgType": "b"}])
        assert result.roles == ["a:x", "b:*"]

    def test_missing_root_collapses_to_empty(self):
        extractor = ClaimsExtractor(root_claims_property="claims")
        result = extractor.extract({"sub": "user-1"})
        assert not result.success
        assert result.roles == []
        assert result.error_code == "MISSING_CLAIMS"

    def test_missing_org_type_collapses_whole_result(self, extractor):
        result = extractor.extract([
            {"organizationType": "a", "role": "x"},
            {"role": "y"},
        ])
        assert not result.success
        assert result.roles == []
        assert result.error_code == "MISSING_ORG_TYPE"

    def test_non_mapping_payload_collapses_to_empty(self, extractor):
        assert extractor.extract("not claims").roles == []
        assert extractor.extract(None).roles == []

    def test_boolean_values_use_json_spelling(self, extractor):
        result = extractor.extract([
            {"organizationType": True, "role": "admin"},
            {"organizationType": "org", "role": True},
            {"organizationType": False},
        ])
        assert result.roles == ["true:admin", "org:true", "false:*"]

    def test_numeric_values_are_rendered(self, extractor):
        result = extractor.extract({"organizationType": 42, "role": 7})
        assert result.roles == ["42:7"]

    def test_nested_value_collapses_to_empty(self, extractor):
        result = extractor.extract({"organizationType": {"id": "org"}, "role": "x"})
        assert not result.success
        assert result.roles == []
        assert result.error_code == "CLAIMS_ERROR"

    def test_from_config(self):
        config = GatekeeperConfig(root_claims_property="claims", claim_org_role_prop="orgRole")
        extractor = ClaimsExtractor.from_config(config)
        assert extractor.path == ("claims",)
        assert extractor.org_type_prop == "organizationType"
        assert extractor.org_role_prop == "orgRole"


class TestExtractOrRaise:
    """Test the raising variant used by hosts that want the failure reason"""

    def test_missing_root(self):
        with pytest.raises(MissingClaimsError):
            ClaimsExtractor(root_claims_property="claims").extract_or_raise({})

    def test_missing_org_type(self, extractor):
        with pytest.raises(MissingOrgTypeError):
            extractor.extract_or_raise({"role": "x"})

    def test_unsupported_structure(self, extractor):
        with pytest.raises(ClaimsError):
            extractor.extract_or_raise(42)

    def test_separator_in_value(self, extractor):
        with pytest.raises(MalformedRoleError):
            extractor.extract_or_raise({"organizationType": "a:b", "role": "x"})


class TestClaimText:
    """Test rendering of scalar claim values"""

    @pytest.mark.parametrize("value, expected", [
        ("org", "org"),
        (True, "true"),
        (False, "false"),
        (3, "3"),
    ])
    def test_scalars(self, value, expected):
        assert claim_text(value) == expected

    @pytest.mark.parametrize("value", [{"a": 1}, ["a"], ("a",)])
    def test_nested_values_raise(self, value):
        with pytest.raises(ClaimsError):
            claim_text(value)


class TestClaimsPath:
    """Test root claims property normalization"""

    def test_none(self):
        assert claims_path(None) == ()

    def test_empty_string(self):
        assert claims_path("") == ()

    def test_single_key(self):
        assert claims_path("claims") == ("claims",)

    def test_sequence(self):
        assert claims_path(["a", "b"]) == ("a", "b")


class TestDecodeJwtPayload:
    """Test unverified JWT payload decoding"""

    def test_decodes_without_verifying_signature(self):
        token = jwt.encode({"organizationType": "org", "role": "admin"}, SECRET, algorithm="HS256")
        payload = decode_jwt_payload(token)
        assert payload == {"organizationType": "org", "role": "admin"}

    def test_expired_token_is_still_decoded(self):
        token = jwt.encode({"organizationType": "org", "exp": 1}, SECRET, algorithm="HS256")
        assert decode_jwt_payload(token)["organizationType"] == "org"

    @pytest.mark.parametrize("token", ["not-a-token", "a.b.c", "", None, 123])
    def test_malformed_token_raises(self, token):
        with pytest.raises(TokenDecodeError):
            decode_jwt_payload(token)
