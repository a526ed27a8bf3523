"""
Unit tests for the token registry.
"""

import pytest

from chainrecord import coin
from chainrecord.errors import NotEvmCoinError
from chainrecord.tokens.registry import (
    EVM_TOKEN_TYPES,
    TOKEN_RULES,
    get_evm_token_type,
    get_token_type,
)
from chainrecord.tokens.token_types import (
    SUPPORTED_TOKEN_TYPES,
    TokenType,
    get_token_version,
)


class TestGetTokenType:
    """Test get_token_type."""

    @pytest.mark.parametrize(
        "coin_index,expected",
        [
            (coin.ETHEREUM, TokenType.ERC20),
            (coin.CLASSIC, TokenType.ETC20),
            (coin.SMARTCHAIN, TokenType.BEP20),
            (coin.POLYGON, TokenType.POLYGON),
            (coin.TOMOCHAIN, TokenType.TRC21),
            (coin.HECO, TokenType.HRC20),
            (coin.CELO, TokenType.CELO),
            (coin.CRONOS, TokenType.CRC20),
            (coin.KAVAEVM, TokenType.KAVAERC20),
            (coin.EVMOS, TokenType.EVMOS_ERC20),
            (coin.OKC, TokenType.KIP20),
            (coin.POLYGONZKEVM, TokenType.POLYGONZKEVM),
            (coin.ZKSYNC, TokenType.ZKSYNC),
        ],
    )
    def test_evm_chains(self, coin_index, expected):
        """Test that EVM chains map to one tag regardless of token id."""
        usdt = "0xdac17f958d2ee523a2206206994597c13d831ec7"
        assert get_token_type(coin_index, usdt) == (expected, True)
        assert get_token_type(coin_index, "") == (expected, True)

    @pytest.mark.parametrize(
        "coin_index,expected",
        [
            (coin.BITCOIN, TokenType.BRC20),
            (coin.BINANCE, TokenType.BEP2),
            (coin.WAVES, TokenType.WAVES),
            (coin.THETA, TokenType.THETA),
            (coin.ONTOLOGY, TokenType.ONTOLOGY),
            (coin.NULS, TokenType.NRC20),
            (coin.VECHAIN, TokenType.VET),
            (coin.NEO, TokenType.NEP5),
            (coin.EOS, TokenType.EOS),
            (coin.SOLANA, TokenType.SPL),
            (coin.HARMONY, TokenType.HRC20),
            (coin.OASIS, TokenType.OASIS),
            (coin.STELLAR, TokenType.STELLAR),
            (coin.ALGORAND, TokenType.ALGORAND),
            (coin.KAVA, TokenType.KAVA),
            (coin.ELROND, TokenType.ESDT),
            (coin.APTOS, TokenType.APTOS),
            (coin.TON, TokenType.TON),
            (coin.SUI, TokenType.SUI),
            (coin.STRIDE, TokenType.STRIDE),
            (coin.NEUTRON, TokenType.NEUTRON),
        ],
    )
    def test_fixed_rules(self, coin_index, expected):
        """Test chains with a single token type."""
        assert get_token_type(coin_index, "any") == (expected, True)

    @pytest.mark.parametrize(
        "token_id,expected",
        [
            ("1002000", TokenType.TRC10),
            ("0", TokenType.TRC10),
            ("TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t", TokenType.TRC20),
            ("", TokenType.TRC20),
            ("12ab", TokenType.TRC20),
            ("-5", TokenType.TRC10),
            ("+7", TokenType.TRC10),
            ("9223372036854775807", TokenType.TRC10),
            ("-9223372036854775808", TokenType.TRC10),
            ("00009223372036854775807", TokenType.TRC10),
            ("9223372036854775808", TokenType.TRC20),
            ("-9223372036854775809", TokenType.TRC20),
            ("99999999999999999999", TokenType.TRC20),
            pytest.param("1" * 5000, TokenType.TRC20, id="very_long"),
        ],
    )
    def test_tron(self, token_id, expected):
        """Test that numeric Tron ids are TRC10 and others TRC20."""
        assert get_token_type(coin.TRON, token_id) == (expected, True)

    @pytest.mark.parametrize(
        "token_id,expected",
        [
            ("terra14z56l0fp2lsf86zy3hty2z47ezkhnthtr9yq76", TokenType.CW20),
            ("uusd", TokenType.TERRA),
            ("", TokenType.TERRA),
            ("terra14z56l0fp2lsf86zy3hty2z47ezkhnthtr9yq7", TokenType.TERRA),
        ],
    )
    def test_terra(self, token_id, expected):
        """Test that 44 character Terra ids are CW20 contracts."""
        assert get_token_type(coin.TERRA, token_id) == (expected, True)

    @pytest.mark.parametrize("coin_index", [2, 3, 145, 99999999])
    def test_unknown_chain(self, coin_index):
        """Test that unknown chains are not found without raising."""
        assert get_token_type(coin_index, "token") == (None, False)

    def test_every_result_is_supported_and_versioned(self):
        """Test that every tag the registry can emit has a version."""
        emitted = set()
        for coin_index in set(EVM_TOKEN_TYPES) | set(TOKEN_RULES) | coin.EVM_COINS:
            for token_id in ("1", "x" * 44, "abc"):
                token_type, found = get_token_type(coin_index, token_id)
                if found:
                    emitted.add(token_type)

        for token_type in emitted:
            assert token_type in SUPPORTED_TOKEN_TYPES
            get_token_version(token_type)

    def test_every_evm_coin_is_classified(self):
        """Test that no EVM chain is left without a token type."""
        for coin_index in coin.EVM_COINS:
            assert get_token_type(coin_index, "")[1], coin.coin_name(coin_index)


class TestGetEvmTokenType:
    """Test get_evm_token_type."""

    def test_known(self):
        """Test EVM chains."""
        assert get_evm_token_type(coin.ETHEREUM) is TokenType.ERC20
        assert get_evm_token_type(coin.ARBITRUM) is TokenType.ARBITRUM

    def test_unknown(self):
        """Test that chains without an EVM tag raise."""
        with pytest.raises(NotEvmCoinError, match="not evm coin 0"):
            get_evm_token_type(coin.BITCOIN)

    def test_table_is_read_only(self):
        """Test that classification tables cannot be modified."""
        with pytest.raises(TypeError):
            EVM_TOKEN_TYPES[coin.BITCOIN] = TokenType.ERC20
        with pytest.raises(TypeError):
            TOKEN_RULES[coin.BITCOIN] = None


class TestCoin:
    """Test the coin helpers."""

    def test_is_evm(self):
        """Test EVM membership."""
        assert coin.is_evm(coin.ETHEREUM)
        assert coin.is_evm(coin.SMARTCHAIN)
        assert not coin.is_evm(coin.BITCOIN)
        assert not coin.is_evm(coin.TRON)

    def test_coin_name(self):
        """Test chain names."""
        assert coin.coin_name(coin.BITCOIN) == "Bitcoin"
        assert coin.coin_name(123456) == "coin 123456"

    def test_coin_indexes_are_unique(self):
        """Test that every named chain has its own index."""
        indexes = [
            getattr(coin, name)
            for name in dir(coin)
            if name.isupper() and isinstance(getattr(coin, name), int)
        ]
        assert len(indexes) == len(set(indexes))
        assert set(indexes) == set(coin.COIN_NAMES)
