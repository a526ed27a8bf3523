"""Direction of a transaction relative to a queried address."""

from typing import TYPE_CHECKING

from .types import Direction, TransactionType

if TYPE_CHECKING:
    from .record import Transaction


def _utxo_direction(tx: "Transaction", address: str) -> Direction:
    spent = any(output.address == address for output in tx.inputs)
    received = any(output.address == address for output in tx.outputs)

    if spent and received:
        return Direction.SELF
    if spent:
        return Direction.OUTGOING
    return Direction.INCOMING


def get_direction(tx: "Transaction", address: str) -> Direction:
    """Return whether ``address`` sent, received or self-transferred ``tx``.

    A direction set by the producer is returned unchanged. ``address`` is
    expected to be one of the transaction's participants; for anything else
    the result is :attr:`Direction.INCOMING`.
    """
    if tx.direction is not None:
        return tx.direction

    if tx.is_utxo:
        return _utxo_direction(tx, address)

    if tx.type in (
        TransactionType.STAKE_UNDELEGATE,
        TransactionType.STAKE_CLAIM_REWARDS,
    ):
        return Direction.INCOMING if address == tx.to_address else Direction.OUTGOING

    if tx.type in (TransactionType.STAKE_DELEGATE, TransactionType.STAKE_REDELEGATE):
        return Direction.OUTGOING if address == tx.from_address else Direction.INCOMING

    if address == tx.from_address and address == tx.to_address:
        return Direction.SELF
    if address == tx.from_address:
        return Direction.OUTGOING
    return Direction.INCOMING
