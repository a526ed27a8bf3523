#!/usr/bin/env python3
"""
Wallet History Demo for chainrecord.

This demo decodes a page of mixed-chain transactions the way an indexer
returns them and renders the history of one wallet address: direction,
value moved, asset key and sanitized memo.
"""

from chainrecord import (
    ChainRecordConfig,
    TxPage,
    configure,
    get_token_type,
    get_token_version,
)
from chainrecord.logging import get_logger

logger = get_logger("chainrecord.demo")

WALLET = "bc1qrfr44n2j4czd5c9txwlnw0yj2h82x9566fglqj"
ETH_WALLET = "0x7d8bf18C7cE84b3E175b339c4Ca93aEd1dD166F1"
CO_SIGNER = "bc1qf9xslrccq3hnwa8dyd9gnjcuxlyz45v5dku5t9"
MERCHANT = "bc1qxy2kgdygjrsqtzq2n0yrf2493p83kkfjhx0wlh"

RAW_PAGE = {
    "total": 4,
    "docs": [
        {
            "id": "btc-consolidate",
            "coin": 0,
            "date": 1690000300,
            "type": "transfer",
            "memo": "payment for invoice",
            "inputs": [
                {"address": WALLET, "value": "10772"},
                {"address": CO_SIGNER, "value": "12257"},
            ],
            "outputs": [{"address": WALLET, "value": "14663"}],
        },
        {
            "id": "btc-spend",
            "coin": 0,
            "date": 1690000200,
            "type": "transfer",
            "memo": "1024",
            "inputs": [{"address": WALLET, "value": "1000"}],
            "outputs": [
                {"address": WALLET, "value": "100"},
                {"address": MERCHANT, "value": "800"},
            ],
        },
        {
            "id": "eth-usdt",
            "coin": 60,
            "date": 1690000100,
            "type": "transfer",
            "from": "0x28C6c06298d514Db089934071355E5743bf21d60",
            "to": ETH_WALLET,
            "metadata": {
                "asset": "c60_t0xdAC17F958D2ee523a2206206994597C13D831ec7",
                "value": "2500000",
                "decimals": 6,
                "symbol": "USDT",
            },
        },
        {
            "id": "btc-spend",
            "coin": 0,
            "date": 1690000200,
            "type": "transfer",
        },
    ],
}


def main():
    """Run the wallet history demo."""
    configure(ChainRecordConfig(log_level="info", log_format="text"))

    logger.info("🚀 chainrecord Wallet History Demo")
    logger.info("=" * 50)

    page = TxPage.of(TxPage.from_dict(RAW_PAGE).docs)
    logger.info(f"📄 Page holds {page.total} unique transactions")

    for tx in page.docs:
        address = WALLET if tx.is_utxo else ETH_WALLET
        direction = tx.get_direction(address)
        value = tx.get_utxo_value_for(address) if tx.is_utxo else tx.metadata.value

        logger.info(f"\n🔎 {tx.id}")
        logger.info(f"   - Asset: {tx.asset_id()}")
        logger.info(f"   - Direction: {direction.value}")
        logger.info(f"   - Value: {value}")
        logger.info(f"   - Participants: {', '.join(sorted(tx.get_addresses()))}")
        logger.info(f"   - Memo: {tx.memo or '(none)'}")

    logger.info("\n🏷️  Token classification")
    for coin_index, token_id in [
        (60, "0xdAC17F958D2ee523a2206206994597C13D831ec7"),
        (195, "1002000"),
        (195, "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t"),
        (0, "ordi"),
    ]:
        token_type, ok = get_token_type(coin_index, token_id)
        if not ok:
            logger.info(f"   - coin {coin_index} {token_id}: unclassified")
            continue
        version = get_token_version(token_type.value)
        logger.info(
            f"   - coin {coin_index} {token_id}: {token_type.value} (v{version.value})"
        )

    logger.info("\n🎉 Demo completed")


if __name__ == "__main__":
    main()
