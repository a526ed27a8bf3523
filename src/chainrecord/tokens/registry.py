"""Classification of on-chain assets into token types.

EVM chains have one token type per chain. Other chains are looked up in a
table of rules keyed by coin index; most rules return a fixed type, a few
inspect the token id.
"""

import re
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

from .. import coin
from ..errors import NotEvmCoinError
from ..logging import LogContext, get_logger
from .token_types import TokenType

logger = get_logger(__name__)

TokenRule = Callable[[str], TokenType]

EVM_TOKEN_TYPES: Mapping[int, TokenType] = MappingProxyType(
    {
        coin.ETHEREUM: TokenType.ERC20,
        coin.CLASSIC: TokenType.ETC20,
        coin.POA: TokenType.POA20,
        coin.CALLISTO: TokenType.CLO20,
        coin.WANCHAIN: TokenType.WAN20,
        coin.THUNDERTOKEN: TokenType.TT20,
        coin.GOCHAIN: TokenType.GO20,
        coin.TOMOCHAIN: TokenType.TRC21,
        coin.SMARTCHAIN: TokenType.BEP20,
        coin.POLYGON: TokenType.POLYGON,
        coin.OPTIMISM: TokenType.OPTIMISM,
        coin.XDAI: TokenType.XDAI,
        coin.AVALANCHEC: TokenType.AVALANCHE,
        coin.FANTOM: TokenType.FANTOM,
        coin.HECO: TokenType.HRC20,
        coin.RONIN: TokenType.RONIN,
        coin.CELO: TokenType.CELO,
        coin.CRONOS: TokenType.CRC20,
        coin.KCC: TokenType.KRC20,
        coin.AURORA: TokenType.AURORA,
        coin.ARBITRUM: TokenType.ARBITRUM,
        coin.KAVAEVM: TokenType.KAVAERC20,
        coin.METER: TokenType.METER,
        coin.EVMOS: TokenType.EVMOS_ERC20,
        coin.OKC: TokenType.KIP20,
        coin.MOONBEAM: TokenType.MOONBEAM,
        coin.KLAYTN: TokenType.KLAYTN,
        coin.METIS: TokenType.METIS,
        coin.MOONRIVER: TokenType.MOONRIVER,
        coin.BOBA: TokenType.BOBA,
        coin.TON: TokenType.TON,
        coin.POLYGONZKEVM: TokenType.POLYGONZKEVM,
        coin.ZKSYNC: TokenType.ZKSYNC,
        coin.SUI: TokenType.SUI,
        coin.STRIDE: TokenType.STRIDE,
        coin.NEUTRON: TokenType.NEUTRON,
    }
)

_INTEGER = re.compile(r"[+-]?[0-9]+")

# TRC10 asset ids are signed 64-bit integers.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Terra CW20 contract addresses are 44 characters; native denoms are shorter.
TERRA_CONTRACT_ID_LENGTH = 44


def _fixed(token_type: TokenType) -> TokenRule:
    return lambda token_id: token_type


def _is_int64(text: str) -> bool:
    if not _INTEGER.fullmatch(text):
        return False
    sign = "-" if text.startswith("-") else ""
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) > len(str(INT64_MAX)):
        return False
    return INT64_MIN <= int(sign + digits) <= INT64_MAX


def _tron_rule(token_id: str) -> TokenType:
    # TRC10 assets are numbered, TRC20 tokens are contract addresses.
    if _is_int64(token_id):
        return TokenType.TRC10
    return TokenType.TRC20


def _terra_rule(token_id: str) -> TokenType:
    if len(token_id) == TERRA_CONTRACT_ID_LENGTH:
        return TokenType.CW20
    return TokenType.TERRA


TOKEN_RULES: Mapping[int, TokenRule] = MappingProxyType(
    {
        coin.BITCOIN: _fixed(TokenType.BRC20),
        coin.TRON: _tron_rule,
        coin.TERRA: _terra_rule,
        coin.BINANCE: _fixed(TokenType.BEP2),
        coin.WAVES: _fixed(TokenType.WAVES),
        coin.THETA: _fixed(TokenType.THETA),
        coin.ONTOLOGY: _fixed(TokenType.ONTOLOGY),
        coin.NULS: _fixed(TokenType.NRC20),
        coin.VECHAIN: _fixed(TokenType.VET),
        coin.NEO: _fixed(TokenType.NEP5),
        coin.EOS: _fixed(TokenType.EOS),
        coin.SOLANA: _fixed(TokenType.SPL),
        coin.HARMONY: _fixed(TokenType.HRC20),
        coin.OASIS: _fixed(TokenType.OASIS),
        coin.STELLAR: _fixed(TokenType.STELLAR),
        coin.ALGORAND: _fixed(TokenType.ALGORAND),
        coin.KAVA: _fixed(TokenType.KAVA),
        coin.ELROND: _fixed(TokenType.ESDT),
        coin.APTOS: _fixed(TokenType.APTOS),
        coin.TON: _fixed(TokenType.TON),
        coin.SUI: _fixed(TokenType.SUI),
        coin.STRIDE: _fixed(TokenType.STRIDE),
        coin.NEUTRON: _fixed(TokenType.NEUTRON),
    }
)


def get_evm_token_type(coin_index: int) -> TokenType:
    """Return the token type of an EVM-style chain.

    Raises:
        NotEvmCoinError: if the coin has no EVM token type.
    """
    try:
        return EVM_TOKEN_TYPES[coin_index]
    except KeyError:
        raise NotEvmCoinError(coin_index) from None


def get_token_type(coin_index: int, token_id: str) -> Tuple[Optional[TokenType], bool]:
    """Classify ``token_id`` on chain ``coin_index``.

    Returns ``(token_type, True)`` on success and ``(None, False)`` when the
    chain has no classification; callers then skip token tagging.
    """
    if coin.is_evm(coin_index):
        token_type = EVM_TOKEN_TYPES.get(coin_index)
    else:
        rule = TOKEN_RULES.get(coin_index)
        token_type = rule(token_id) if rule is not None else None

    if token_type is None:
        logger.debug(
            "No token type for chain",
            context=LogContext(component="token_registry", coin=coin_index),
            extra={"token_id": token_id},
        )
        return None, False

    return token_type, True
