"""Token classification tags and their protocol versions.

The tag strings and version numbers are read by other services and must stay
stable: a tag is never renamed or reused for a different chain, and every
supported tag needs an entry in the version table.
"""

from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from ..errors import TokenVersionNotImplementedError, UnknownTokenTypeError
from ..logging import get_logger

logger = get_logger(__name__)


class TokenType(str, Enum):
    """Token classification tags (ERC-20, TRC-20, BEP-2 style)."""

    COIN = "coin"
    GAS = "gas"
    BRC20 = "BRC20"
    ERC20 = "ERC20"
    ERC721 = "ERC721"
    ERC1155 = "ERC1155"
    BEP2 = "BEP2"
    BEP8 = "BEP8"
    BEP20 = "BEP20"
    TRC10 = "TRC10"
    ETC20 = "ETC20"
    POA20 = "POA20"
    TRC20 = "TRC20"
    TRC21 = "TRC21"
    CLO20 = "CLO20"
    GO20 = "GO20"
    WAN20 = "WAN20"
    TT20 = "TT20"
    KAVA = "KAVA"
    SPL = "SPL"
    POLYGON = "POLYGON"
    OPTIMISM = "OPTIMISM"
    XDAI = "XDAI"
    AVALANCHE = "AVALANCHE"
    FANTOM = "FANTOM"
    HRC20 = "HRC20"
    ARBITRUM = "ARBITRUM"
    TERRA = "TERRA"
    RONIN = "RONIN"
    EOS = "EOS"
    NEP5 = "NEP5"
    NRC20 = "NRC20"
    VET = "VET"
    ONTOLOGY = "ONTOLOGY"
    THETA = "THETA"
    TOMO = "TOMO"
    WAVES = "WAVES"
    POA = "POA"
    CELO = "CELO"
    ESDT = "ESDT"
    CW20 = "CW20"
    OASIS = "OASIS"
    CRC20 = "CRC20"
    STELLAR = "STELLAR"
    KRC20 = "KRC20"
    AURORA = "AURORA"
    ALGORAND = "ALGORAND"
    KAVAERC20 = "KAVAERC20"
    METER = "METER"
    EVMOS_ERC20 = "EVMOS_ERC20"
    KIP20 = "KIP20"
    APTOS = "APTOS"
    MOONBEAM = "MOONBEAM"
    KLAYTN = "KLAYTN"
    METIS = "METIS"
    MOONRIVER = "MOONRIVER"
    BOBA = "BOBA"
    TON = "TON"
    POLYGONZKEVM = "ZKEVM"
    ZKSYNC = "ZKSYNC"
    SUI = "SUI"
    STRIDE = "STRIDE"
    NEUTRON = "NEUTRON"
    FA2 = "FA2"

    def __str__(self) -> str:
        return self.value


class TokenVersion(IntEnum):
    """Wire/encoding version a token type's downstream codec uses."""

    UNDEFINED = -1
    V0 = 0
    V1 = 1
    V3 = 3
    V4 = 4
    V5 = 5
    V6 = 6
    V7 = 7
    V8 = 8
    V9 = 9
    V10 = 10
    V11 = 11
    V12 = 12


# Tags accepted by parse_token_type. COIN, GAS and FA2 are tag values but not
# token standards a client may ask for.
SUPPORTED_TOKEN_TYPES: Tuple[TokenType, ...] = (
    TokenType.BRC20,
    TokenType.ERC20,
    TokenType.ERC721,
    TokenType.ERC1155,
    TokenType.BEP2,
    TokenType.BEP8,
    TokenType.BEP20,
    TokenType.TRC10,
    TokenType.ETC20,
    TokenType.POA20,
    TokenType.TRC20,
    TokenType.TRC21,
    TokenType.CLO20,
    TokenType.GO20,
    TokenType.WAN20,
    TokenType.TT20,
    TokenType.CW20,
    TokenType.KAVA,
    TokenType.SPL,
    TokenType.POLYGON,
    TokenType.OPTIMISM,
    TokenType.XDAI,
    TokenType.AVALANCHE,
    TokenType.FANTOM,
    TokenType.HRC20,
    TokenType.ARBITRUM,
    TokenType.TERRA,
    TokenType.RONIN,
    TokenType.EOS,
    TokenType.NEP5,
    TokenType.NRC20,
    TokenType.VET,
    TokenType.ONTOLOGY,
    TokenType.THETA,
    TokenType.TOMO,
    TokenType.WAVES,
    TokenType.POA,
    TokenType.CELO,
    TokenType.ESDT,
    TokenType.OASIS,
    TokenType.CRC20,
    TokenType.STELLAR,
    TokenType.KRC20,
    TokenType.AURORA,
    TokenType.ALGORAND,
    TokenType.KAVAERC20,
    TokenType.METER,
    TokenType.EVMOS_ERC20,
    TokenType.KIP20,
    TokenType.APTOS,
    TokenType.MOONBEAM,
    TokenType.KLAYTN,
    TokenType.METIS,
    TokenType.MOONRIVER,
    TokenType.BOBA,
    TokenType.TON,
    TokenType.POLYGONZKEVM,
    TokenType.ZKSYNC,
    TokenType.SUI,
    TokenType.STRIDE,
    TokenType.NEUTRON,
)

_SUPPORTED_BY_VALUE: Mapping[str, TokenType] = MappingProxyType(
    {token_type.value: token_type for token_type in SUPPORTED_TOKEN_TYPES}
)


def _versions(*groups: Tuple[TokenVersion, Tuple[TokenType, ...]]):
    table = {}
    for version, token_types in groups:
        for token_type in token_types:
            table[token_type] = version
    return MappingProxyType(table)


TOKEN_VERSIONS: Mapping[TokenType, TokenVersion] = _versions(
    (
        TokenVersion.V0,
        (
            TokenType.ERC20,
            TokenType.BEP2,
            TokenType.BEP20,
            TokenType.BEP8,
            TokenType.ETC20,
            TokenType.POA20,
            TokenType.CLO20,
            TokenType.TRC10,
            TokenType.TRC21,
            TokenType.WAN20,
            TokenType.GO20,
            TokenType.TT20,
            TokenType.WAVES,
            TokenType.APTOS,
        ),
    ),
    (TokenVersion.V1, (TokenType.TRC20,)),
    (TokenVersion.V3, (TokenType.SPL, TokenType.KAVA)),
    (TokenVersion.V4, (TokenType.POLYGON,)),
    (
        TokenVersion.V5,
        (
            TokenType.AVALANCHE,
            TokenType.ARBITRUM,
            TokenType.FANTOM,
            TokenType.HRC20,
            TokenType.OPTIMISM,
            TokenType.XDAI,
        ),
    ),
    (TokenVersion.V6, (TokenType.TERRA,)),
    (TokenVersion.V7, (TokenType.CELO, TokenType.NRC20)),
    (TokenVersion.V8, (TokenType.CW20,)),
    (TokenVersion.V9, (TokenType.ESDT, TokenType.CRC20)),
    (TokenVersion.V10, (TokenType.KRC20, TokenType.STELLAR)),
    (TokenVersion.V11, (TokenType.RONIN, TokenType.AURORA)),
    (
        TokenVersion.V12,
        (TokenType.TON, TokenType.POLYGONZKEVM, TokenType.ZKSYNC, TokenType.SUI),
    ),
    (
        TokenVersion.UNDEFINED,
        (
            TokenType.BRC20,
            TokenType.ERC721,
            TokenType.ERC1155,
            TokenType.EOS,
            TokenType.NEP5,
            TokenType.VET,
            TokenType.ONTOLOGY,
            TokenType.THETA,
            TokenType.TOMO,
            TokenType.POA,
            TokenType.OASIS,
            TokenType.ALGORAND,
            TokenType.KAVAERC20,
            TokenType.METER,
            TokenType.EVMOS_ERC20,
            TokenType.KIP20,
            TokenType.MOONBEAM,
            TokenType.KLAYTN,
            TokenType.METIS,
            TokenType.MOONRIVER,
            TokenType.BOBA,
            TokenType.STRIDE,
            TokenType.NEUTRON,
            TokenType.FA2,
        ),
    ),
)


def get_supported_token_types() -> Tuple[TokenType, ...]:
    """Return every token type clients may request, in registry order."""
    return SUPPORTED_TOKEN_TYPES


def parse_token_type(value: str) -> TokenType:
    """Return the supported token type whose tag is exactly ``value``.

    Raises:
        UnknownTokenTypeError: if ``value`` is not a supported tag.
    """
    try:
        return _SUPPORTED_BY_VALUE[value]
    except (KeyError, TypeError):
        raise UnknownTokenTypeError(str(value)) from None


def get_token_version(token_type: Union[TokenType, str]) -> TokenVersion:
    """Return the protocol version for a supported token type.

    Raises:
        UnknownTokenTypeError: if ``token_type`` is not a supported tag.
        TokenVersionNotImplementedError: if a supported tag has no version
            entry, which means the registry tables are out of sync.
    """
    value = token_type.value if isinstance(token_type, TokenType) else token_type
    parsed = parse_token_type(value)

    try:
        return TOKEN_VERSIONS[parsed]
    except KeyError:
        logger.critical(
            "Token type missing from version table",
            extra={"token_type": parsed.value},
        )
        raise TokenVersionNotImplementedError(parsed.value) from None
