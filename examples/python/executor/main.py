import asyncio
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from zora_premint import PremintClient, setup_logging
from zora_premint.chain import Web3ChainReader
from zora_premint.exceptions import PremintError
from zora_premint.signers import EvmWalletSigner

load_dotenv(Path(__file__).parent.parent.parent.parent / ".env")
setup_logging()
logger = logging.getLogger(__name__)

EXECUTOR_PRIVATE_KEY = os.getenv("EXECUTOR_PRIVATE_KEY", "")
CHAIN_ID = int(os.getenv("PREMINT_CHAIN_ID", "999"))

if not EXECUTOR_PRIVATE_KEY:
    print("\nError: EXECUTOR_PRIVATE_KEY not set in .env file\n")
    exit(1)

if len(sys.argv) < 3:
    print("\nUsage: main.py <collection_address> <uid> [quantity]\n")
    exit(1)


async def main(contract_address: str, uid: int, quantity: int):
    wallet = EvmWalletSigner.from_private_key(EXECUTOR_PRIVATE_KEY, network=CHAIN_ID)
    chain = Web3ChainReader(CHAIN_ID)

    async with PremintClient.for_chain(CHAIN_ID) as client:
        try:
            record = await client.get_premint(contract_address, uid)
            validity = await client.is_valid_signature(record, chain=chain)
            if not validity.is_valid:
                logger.error(f"Signature no longer valid, signer {validity.recovered_signer}")
                return

            print(f"Executing premint {uid} on {contract_address}")
            print(f"  Quantity: {quantity}")
            print(f"  Value: {quantity * client.settings.reward_per_token} wei")
            tx_hash = await client.execute_premint(
                record, wallet, quantity, mint_comment="minted from python", chain=chain
            )
        except PremintError as e:
            logger.error(f"Premint execution failed: {e}")
            return

        print(f"\nTransaction: {tx_hash}")


if __name__ == "__main__":
    quantity = int(sys.argv[3]) if len(sys.argv) > 3 else 1
    asyncio.run(main(sys.argv[1], int(sys.argv[2]), quantity))
