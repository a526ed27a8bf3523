"""Enumerations and value objects of the normalized transaction record."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Type, Union


class TransactionType(Enum):
    """Transaction kinds. Address and direction rules dispatch on these."""

    TRANSFER = "transfer"
    TRANSFER_NFT = "transfer_nft"
    CONTRACT_CALL = "contract_call"
    SWAP = "swap"
    STAKE_DELEGATE = "stake_delegate"
    STAKE_UNDELEGATE = "stake_undelegate"
    STAKE_REDELEGATE = "stake_redelegate"
    STAKE_CLAIM_REWARDS = "stake_claim_rewards"
    STAKE_COMPOUND = "stake_compound"
    UNDEFINED = "undefined"

    @classmethod
    def from_value(cls, value: Optional[str]) -> Optional["TransactionType"]:
        """Return the kind named by ``value``, or None if it is not one.

        Never raises: producers may emit kinds this version does not model.
        """
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# Kinds that producers emit and consumers index. UNDEFINED is a placeholder.
SUPPORTED_TYPES: Tuple[TransactionType, ...] = (
    TransactionType.TRANSFER,
    TransactionType.SWAP,
    TransactionType.CONTRACT_CALL,
    TransactionType.STAKE_CLAIM_REWARDS,
    TransactionType.STAKE_DELEGATE,
    TransactionType.STAKE_UNDELEGATE,
    TransactionType.STAKE_REDELEGATE,
    TransactionType.STAKE_COMPOUND,
    TransactionType.TRANSFER_NFT,
)

STAKING_TYPES = frozenset(
    {
        TransactionType.STAKE_DELEGATE,
        TransactionType.STAKE_UNDELEGATE,
        TransactionType.STAKE_REDELEGATE,
        TransactionType.STAKE_CLAIM_REWARDS,
        TransactionType.STAKE_COMPOUND,
    }
)


class Direction(Enum):
    """Direction of a transaction relative to one address."""

    OUTGOING = "outgoing"
    INCOMING = "incoming"
    SELF = "yourself"


class Status(Enum):
    """Settlement status reported by the producer."""

    COMPLETED = "completed"
    PENDING = "pending"
    ERROR = "error"


@dataclass(frozen=True)
class TxOutput:
    """An addressed value in a UTXO-style input or output list.

    ``value`` is a decimal string in the chain's base unit.
    """

    address: str
    value: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"address": self.address, "value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TxOutput":
        return cls(address=data.get("address", ""), value=str(data.get("value", "")))


@dataclass(frozen=True)
class Transfer:
    """Value transfer of a coin or fungible token; also used by staking kinds."""

    asset: str = ""
    value: str = "0"
    decimals: int = 0
    symbol: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "asset": self.asset,
            "value": self.value,
            "decimals": self.decimals,
            "symbol": self.symbol,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Transfer":
        return cls(
            asset=data.get("asset", ""),
            value=str(data.get("value", "0")),
            decimals=int(data.get("decimals", 0)),
            symbol=data.get("symbol", ""),
        )


@dataclass(frozen=True)
class TransferNFT:
    """Transfer of a single non-fungible token."""

    asset: str = ""
    token_id: str = ""
    name: str = ""
    collection: str = ""
    value: str = "1"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "asset": self.asset,
            "token_id": self.token_id,
            "name": self.name,
            "collection": self.collection,
            "value": self.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TransferNFT":
        return cls(
            asset=data.get("asset", ""),
            token_id=str(data.get("token_id", "")),
            name=data.get("name", ""),
            collection=data.get("collection", ""),
            value=str(data.get("value", "1")),
        )


@dataclass(frozen=True)
class ContractCall:
    """Contract invocation, including swaps."""

    asset: str = ""
    value: str = "0"
    input: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"asset": self.asset, "value": self.value, "input": self.input}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContractCall":
        return cls(
            asset=data.get("asset", ""),
            value=str(data.get("value", "0")),
            input=data.get("input", ""),
        )


Metadata = Union[Transfer, TransferNFT, ContractCall]

# Metadata shape carried by each kind. Decoding picks the class from here;
# nothing dispatches on the class of a decoded payload.
METADATA_TYPES: Mapping[TransactionType, Type[Metadata]] = MappingProxyType(
    {
        TransactionType.TRANSFER: Transfer,
        TransactionType.TRANSFER_NFT: TransferNFT,
        TransactionType.CONTRACT_CALL: ContractCall,
        TransactionType.SWAP: ContractCall,
        TransactionType.STAKE_DELEGATE: Transfer,
        TransactionType.STAKE_UNDELEGATE: Transfer,
        TransactionType.STAKE_REDELEGATE: Transfer,
        TransactionType.STAKE_CLAIM_REWARDS: Transfer,
        TransactionType.STAKE_COMPOUND: Transfer,
    }
)
