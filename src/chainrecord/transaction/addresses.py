"""Participant addresses of a transaction.

Addresses returned here are the ones a transaction is indexed under. Kinds
that are not modelled yet yield no addresses rather than guessing from
``from``/``to``.
"""

from typing import TYPE_CHECKING, Iterable, List

from .types import STAKING_TYPES, TransactionType

if TYPE_CHECKING:
    from .record import Transaction

_FROM_TO_TYPES = frozenset(
    {
        TransactionType.TRANSFER,
        TransactionType.TRANSFER_NFT,
        TransactionType.CONTRACT_CALL,
        TransactionType.SWAP,
    }
)


def _unique(addresses: Iterable[str]) -> List[str]:
    seen = {}
    for address in addresses:
        if address:
            seen.setdefault(address, None)
    return list(seen)


def get_addresses(tx: "Transaction") -> List[str]:
    """Return the addresses that participated in ``tx``.

    Order carries no meaning and ``from``/``to`` are not de-duplicated for
    account-model records.
    """
    if tx.is_utxo and tx.type is TransactionType.TRANSFER:
        return _unique(
            [output.address for output in tx.inputs]
            + [output.address for output in tx.outputs]
        )

    if tx.type in _FROM_TO_TYPES:
        return [tx.from_address, tx.to_address]

    if tx.type is TransactionType.UNDEFINED:
        return [a for a in (tx.from_address, tx.to_address) if a]

    # Staking is reported for the acting account; the validator is not a
    # participant.
    if tx.type in STAKING_TYPES:
        return [tx.from_address]

    return []
