"""Value moved by an address in a UTXO-style transaction.

Values are decimal strings that can exceed 64 bits, so they are summed as
Python integers and returned as strings.
"""

import re
from typing import TYPE_CHECKING, List, Optional, Tuple

from ..errors import AmountParseError, ErrorContext
from ..logging import LogContext, get_logger

if TYPE_CHECKING:
    from .record import Transaction

logger = get_logger(__name__)

_AMOUNT = re.compile(r"[0-9]+")


def parse_amount(value: str, address: Optional[str] = None) -> int:
    """Parse a non-negative decimal integer amount.

    Raises:
        AmountParseError: if ``value`` is not made of ASCII digits only.
    """
    if not isinstance(value, str) or not _AMOUNT.fullmatch(value):
        raise AmountParseError(str(value), address=address)
    return int(value)


def _parse_values(tx: "Transaction", outputs) -> List[Tuple[str, int]]:
    parsed = []
    for output in outputs:
        try:
            parsed.append((output.address, parse_amount(output.value, output.address)))
        except AmountParseError as e:
            e.context = ErrorContext(
                component="utxo",
                operation="get_utxo_value_for",
                coin=tx.coin,
                transaction_id=tx.id,
            )
            logger.warning(
                "Malformed UTXO value",
                context=LogContext(
                    component="utxo",
                    coin=tx.coin,
                    transaction_id=tx.id,
                    address=output.address,
                ),
                extra={"value": output.value},
            )
            raise
    return parsed


def get_utxo_value_for(tx: "Transaction", address: str) -> str:
    """Return the amount ``address`` moved in ``tx`` as a decimal string.

    A spender moved everything it paid to other addresses; when every output
    returns to the spender the whole output total counts. A pure receiver
    moved what was paid to it.

    Raises:
        AmountParseError: if any input or output value is malformed.
    """
    inputs = _parse_values(tx, tx.inputs)
    outputs = _parse_values(tx, tx.outputs)

    total_output = sum(value for _, value in outputs)
    own_output = sum(value for owner, value in outputs if owner == address)

    if any(owner == address for owner, _ in inputs):
        sent = total_output - own_output
        return str(sent if sent else total_output)

    return str(own_output)
