"""Coin indexes of the chains chainrecord knows about.

Indexes follow SLIP-44 where a registration exists and the wallet registry's
extended range (``10000000 + chain id`` style) for EVM networks that share
Ethereum's derivation path.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping

BITCOIN = 0
TERRA = 330
ETHEREUM = 60
CLASSIC = 61
STELLAR = 148
EOS = 194
TRON = 195
POA = 178
ALGORAND = 283
KAVA = 459
OASIS = 474
THETA = 500
SOLANA = 501
ELROND = 508
TON = 607
APTOS = 637
BINANCE = 714
SUI = 784
VECHAIN = 818
CALLISTO = 820
NEO = 888
TOMOCHAIN = 889
FANTOM = 250
POLYGON = 966
OKC = 996
THUNDERTOKEN = 1001
HARMONY = 1023
ONTOLOGY = 1024
MOONBEAM = 1284
GOCHAIN = 6060
NULS = 8964
METER = 18000
CELO = 52752
METIS = 1001088
WANCHAIN = 5718350
WAVES = 5741564
CRONOS = 10000025
OPTIMISM = 10000070
XDAI = 10000100
BOBA = 10000288
KCC = 10000321
ZKSYNC = 10000324
HECO = 10000553
POLYGONZKEVM = 10001101
MOONRIVER = 10001285
RONIN = 10002020
KAVAEVM = 10002222
KLAYTN = 10008217
AVALANCHEC = 10009000
ARBITRUM = 10042221
SMARTCHAIN = 20000714
EVMOS = 20009001
STRIDE = 30000118
NEUTRON = 40000118
AURORA = 1323161554

COIN_NAMES: Mapping[int, str] = MappingProxyType(
    {
        BITCOIN: "Bitcoin",
        TERRA: "Terra",
        ETHEREUM: "Ethereum",
        CLASSIC: "Ethereum Classic",
        STELLAR: "Stellar",
        EOS: "EOS",
        TRON: "Tron",
        POA: "POA Network",
        ALGORAND: "Algorand",
        KAVA: "Kava",
        OASIS: "Oasis",
        THETA: "Theta",
        SOLANA: "Solana",
        ELROND: "MultiversX",
        TON: "TON",
        APTOS: "Aptos",
        BINANCE: "BNB Beacon Chain",
        SUI: "Sui",
        VECHAIN: "VeChain",
        CALLISTO: "Callisto",
        NEO: "NEO",
        TOMOCHAIN: "TomoChain",
        FANTOM: "Fantom",
        POLYGON: "Polygon",
        OKC: "OKX Chain",
        THUNDERTOKEN: "ThunderCore",
        HARMONY: "Harmony",
        ONTOLOGY: "Ontology",
        MOONBEAM: "Moonbeam",
        GOCHAIN: "GoChain",
        NULS: "NULS",
        METER: "Meter",
        CELO: "Celo",
        METIS: "Metis",
        WANCHAIN: "Wanchain",
        WAVES: "Waves",
        CRONOS: "Cronos",
        OPTIMISM: "Optimism",
        XDAI: "Gnosis Chain",
        BOBA: "Boba",
        KCC: "KuCoin Community Chain",
        ZKSYNC: "zkSync Era",
        HECO: "Huobi ECO Chain",
        POLYGONZKEVM: "Polygon zkEVM",
        MOONRIVER: "Moonriver",
        RONIN: "Ronin",
        KAVAEVM: "Kava EVM",
        KLAYTN: "Klaytn",
        AVALANCHEC: "Avalanche C-Chain",
        ARBITRUM: "Arbitrum",
        SMARTCHAIN: "BNB Smart Chain",
        EVMOS: "Evmos",
        STRIDE: "Stride",
        NEUTRON: "Neutron",
        AURORA: "Aurora",
    }
)

EVM_COINS: FrozenSet[int] = frozenset(
    {
        ETHEREUM,
        CLASSIC,
        POA,
        CALLISTO,
        WANCHAIN,
        THUNDERTOKEN,
        GOCHAIN,
        TOMOCHAIN,
        SMARTCHAIN,
        POLYGON,
        OPTIMISM,
        XDAI,
        AVALANCHEC,
        FANTOM,
        HECO,
        RONIN,
        CELO,
        CRONOS,
        KCC,
        AURORA,
        ARBITRUM,
        KAVAEVM,
        METER,
        EVMOS,
        OKC,
        MOONBEAM,
        KLAYTN,
        METIS,
        MOONRIVER,
        BOBA,
        POLYGONZKEVM,
        ZKSYNC,
    }
)


def is_evm(coin: int) -> bool:
    """Return True if the coin is an EVM-compatible chain."""
    return coin in EVM_COINS


def coin_name(coin: int) -> str:
    """Human readable chain name, or ``coin <index>`` for unknown indexes."""
    return COIN_NAMES.get(coin, f"coin {coin}")
