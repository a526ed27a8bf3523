"""Cross-chain asset keys.

An asset key is ``c<coin>`` for a chain's native coin and
``c<coin>_t<token_id>`` for a token on that chain. Asset lookup services
index on this exact string, so the format must not change.
"""

from typing import Tuple

from .errors import AssetIdError

COIN_PREFIX = "c"
TOKEN_PREFIX = "t"
SEPARATOR = "_"


def build_asset_id(coin: int, token_id: str = "") -> str:
    """Build the asset key for ``coin`` and an optional ``token_id``."""
    asset_id = f"{COIN_PREFIX}{coin}"
    if token_id:
        asset_id += f"{SEPARATOR}{TOKEN_PREFIX}{token_id}"
    return asset_id


def parse_asset_id(asset_id: str) -> Tuple[int, str]:
    """Split an asset key into ``(coin, token_id)``.

    ``token_id`` is empty for native coins. Token ids may themselves contain
    underscores; only the first separator is significant.
    """
    coin_part, sep, token_part = asset_id.partition(SEPARATOR)

    if not coin_part.startswith(COIN_PREFIX):
        raise AssetIdError(asset_id, "missing coin prefix")
    digits = coin_part[len(COIN_PREFIX) :]
    if not digits.isascii() or not digits.isdigit():
        raise AssetIdError(asset_id, "coin is not a number")

    if not sep:
        return int(digits), ""

    if not token_part.startswith(TOKEN_PREFIX) or len(token_part) == len(TOKEN_PREFIX):
        raise AssetIdError(asset_id, "missing token id")
    return int(digits), token_part[len(TOKEN_PREFIX) :]
