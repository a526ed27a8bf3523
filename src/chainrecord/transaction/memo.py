"""Memo sanitizing.

Downstream systems read the memo as a numeric payment-matching code, so
anything that is not a plain non-negative integer is dropped.
"""

from ..logging import get_logger

logger = get_logger(__name__)


def clean_memo(memo: str) -> str:
    """Return ``memo`` if it is an unsigned decimal integer, else ``""``."""
    if memo and memo.isascii() and memo.isdigit():
        return memo

    if memo:
        logger.trace("Dropping non-numeric memo", extra={"memo_length": len(memo)})
    return ""
