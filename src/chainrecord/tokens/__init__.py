"""Token registry.

Maps a chain and on-chain asset id to a classification tag, and each tag to
the protocol version its downstream codec uses.
"""

from .registry import EVM_TOKEN_TYPES, TOKEN_RULES, get_evm_token_type, get_token_type
from .token import Token
from .token_types import (
    SUPPORTED_TOKEN_TYPES,
    TOKEN_VERSIONS,
    TokenType,
    TokenVersion,
    get_supported_token_types,
    get_token_version,
    parse_token_type,
)

__all__ = [
    "Token",
    "TokenType",
    "TokenVersion",
    "SUPPORTED_TOKEN_TYPES",
    "TOKEN_VERSIONS",
    "EVM_TOKEN_TYPES",
    "TOKEN_RULES",
    "get_supported_token_types",
    "get_token_type",
    "get_evm_token_type",
    "get_token_version",
    "parse_token_type",
]
