"""
Unit tests for token types and versions.
"""

import pytest

from chainrecord.errors import (
    FatalError,
    TokenVersionNotImplementedError,
    UnknownTokenTypeError,
)
from chainrecord.tokens import token_types
from chainrecord.tokens.token_types import (
    SUPPORTED_TOKEN_TYPES,
    TOKEN_VERSIONS,
    TokenType,
    TokenVersion,
    get_supported_token_types,
    get_token_version,
    parse_token_type,
)


class TestTokenType:
    """Test the TokenType enum."""

    def test_tag_values(self):
        """Test wire values of a sample of tags."""
        assert TokenType.ERC20.value == "ERC20"
        assert TokenType.TRC20.value == "TRC20"
        assert TokenType.BEP2.value == "BEP2"
        assert TokenType.POLYGONZKEVM.value == "ZKEVM"
        assert TokenType.EVMOS_ERC20.value == "EVMOS_ERC20"
        assert TokenType.COIN.value == "coin"
        assert TokenType.GAS.value == "gas"

    def test_tags_compare_equal_to_text(self):
        """Test that tags can be compared with their wire strings."""
        assert TokenType.ERC20 == "ERC20"
        assert str(TokenType.SPL) == "SPL"

    def test_tag_values_are_unique(self):
        """Test that no tag string is reused."""
        values = [token_type.value for token_type in TokenType]
        assert len(values) == len(set(values))


class TestSupportedTokenTypes:
    """Test the supported token type enumeration."""

    def test_supported_count(self):
        """Test the number of supported tags."""
        assert len(SUPPORTED_TOKEN_TYPES) == 61
        assert get_supported_token_types() == SUPPORTED_TOKEN_TYPES

    def test_supported_has_no_duplicates(self):
        """Test that no tag is listed twice."""
        assert len(set(SUPPORTED_TOKEN_TYPES)) == len(SUPPORTED_TOKEN_TYPES)

    def test_non_standard_tags_not_supported(self):
        """Test that coin, gas and FA2 are not client facing tags."""
        assert TokenType.COIN not in SUPPORTED_TOKEN_TYPES
        assert TokenType.GAS not in SUPPORTED_TOKEN_TYPES
        assert TokenType.FA2 not in SUPPORTED_TOKEN_TYPES


class TestParseTokenType:
    """Test parse_token_type."""

    @pytest.mark.parametrize("token_type", SUPPORTED_TOKEN_TYPES)
    def test_parse_round_trip(self, token_type):
        """Test that every supported tag parses back to itself."""
        assert parse_token_type(token_type.value) is token_type

    @pytest.mark.parametrize(
        "value", ["", "erc20", "ERC-20", "UNKNOWN", "coin", "gas", "FA2", " ERC20"]
    )
    def test_parse_unknown(self, value):
        """Test that unknown text is rejected."""
        with pytest.raises(UnknownTokenTypeError, match="unknown token type"):
            parse_token_type(value)

    def test_unknown_is_value_error(self):
        """Test that unknown tags can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_token_type("NOPE")

    def test_unknown_error_details(self):
        """Test the structured details of the error."""
        with pytest.raises(UnknownTokenTypeError) as exc_info:
            parse_token_type("NOPE")

        error = exc_info.value
        assert error.token_type == "NOPE"
        assert error.error_code == "UNKNOWN_TOKEN_TYPE"
        assert error.to_dict()["category"] == "token"


class TestGetTokenVersion:
    """Test get_token_version."""

    @pytest.mark.parametrize("token_type", SUPPORTED_TOKEN_TYPES)
    def test_every_supported_type_has_version(self, token_type):
        """Test that the version table covers every supported tag."""
        version = get_token_version(token_type)
        assert isinstance(version, TokenVersion)

    @pytest.mark.parametrize(
        "token_type,expected",
        [
            (TokenType.ERC20, TokenVersion.V0),
            (TokenType.BEP20, TokenVersion.V0),
            (TokenType.APTOS, TokenVersion.V0),
            (TokenType.TRC20, TokenVersion.V1),
            (TokenType.SPL, TokenVersion.V3),
            (TokenType.KAVA, TokenVersion.V3),
            (TokenType.POLYGON, TokenVersion.V4),
            (TokenType.ARBITRUM, TokenVersion.V5),
            (TokenType.TERRA, TokenVersion.V6),
            (TokenType.CELO, TokenVersion.V7),
            (TokenType.CW20, TokenVersion.V8),
            (TokenType.ESDT, TokenVersion.V9),
            (TokenType.STELLAR, TokenVersion.V10),
            (TokenType.AURORA, TokenVersion.V11),
            (TokenType.POLYGONZKEVM, TokenVersion.V12),
            (TokenType.BRC20, TokenVersion.UNDEFINED),
            (TokenType.ERC721, TokenVersion.UNDEFINED),
            (TokenType.NEUTRON, TokenVersion.UNDEFINED),
        ],
    )
    def test_versions(self, token_type, expected):
        """Test specific version assignments."""
        assert get_token_version(token_type) == expected

    def test_undefined_is_minus_one(self):
        """Test the undefined sentinel value."""
        assert int(TokenVersion.UNDEFINED) == -1

    def test_accepts_text(self):
        """Test that the tag may be passed as text."""
        assert get_token_version("TRC20") == TokenVersion.V1

    def test_unknown_text(self):
        """Test that unknown text fails before the table lookup."""
        with pytest.raises(UnknownTokenTypeError):
            get_token_version("NOPE")

    def test_unsupported_tag(self):
        """Test that tags outside the supported set are unknown."""
        with pytest.raises(UnknownTokenTypeError):
            get_token_version(TokenType.COIN)

    def test_missing_version_entry(self, monkeypatch):
        """Test the completeness guard on an incomplete table."""
        versions = dict(TOKEN_VERSIONS)
        del versions[TokenType.SPL]
        monkeypatch.setattr(token_types, "TOKEN_VERSIONS", versions)

        with pytest.raises(TokenVersionNotImplementedError) as exc_info:
            get_token_version(TokenType.SPL)

        assert "token version not implemented" in str(exc_info.value)
        assert isinstance(exc_info.value, FatalError)
        assert exc_info.value.token_type == "SPL"

    def test_version_table_is_read_only(self):
        """Test that the version table cannot be modified."""
        with pytest.raises(TypeError):
            TOKEN_VERSIONS[TokenType.SPL] = TokenVersion.V0
