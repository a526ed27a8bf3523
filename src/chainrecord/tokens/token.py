"""Token record shared by every chain integration."""

from dataclasses import dataclass
from typing import Any, Dict

from ..asset import build_asset_id
from ..errors import UnknownTokenTypeError
from .token_types import TokenType


@dataclass(frozen=True)
class Token:
    """A non-native token (ERC-20, TRC-20, BEP-2 ...).

    Built once by chain ingestion and never modified. The wire field names
    and ``type`` strings are read by other services.
    """

    name: str
    symbol: str
    decimals: int
    token_id: str
    coin: int
    type: TokenType

    def __post_init__(self) -> None:
        if self.decimals < 0:
            raise ValueError("Decimals must be non-negative")
        if self.coin < 0:
            raise ValueError("Coin must be non-negative")

    @property
    def asset_id(self) -> str:
        """Cross-chain asset key of this token."""
        return build_asset_id(self.coin, self.token_id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire dictionary."""
        return {
            "name": self.name,
            "symbol": self.symbol,
            "decimals": self.decimals,
            "token_id": self.token_id,
            "coin": self.coin,
            "type": self.type.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Token":
        """Create from the wire dictionary.

        Raises:
            UnknownTokenTypeError: if ``type`` is not a known tag.
        """
        raw_type = data.get("type", "")
        try:
            token_type = TokenType(raw_type)
        except ValueError:
            raise UnknownTokenTypeError(str(raw_type)) from None

        return cls(
            name=data.get("name", ""),
            symbol=data.get("symbol", ""),
            decimals=int(data.get("decimals", 0)),
            token_id=data.get("token_id", ""),
            coin=int(data.get("coin", 0)),
            type=token_type,
        )
