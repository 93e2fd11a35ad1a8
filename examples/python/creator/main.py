import asyncio
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from zora_premint import PremintClient, setup_logging
from zora_premint.exceptions import PremintError
from zora_premint.signers import EvmWalletSigner

load_dotenv(Path(__file__).parent.parent.parent.parent / ".env")
setup_logging()
logger = logging.getLogger(__name__)

CREATOR_PRIVATE_KEY = os.getenv("CREATOR_PRIVATE_KEY", "")
CHAIN_ID = int(os.getenv("PREMINT_CHAIN_ID", "999"))
TOKEN_URI = os.getenv("TOKEN_URI", "ipfs://bafkreice23maski3x52tsfqgxstx3kbiifnt5jotg3a5ynvve53c4soi2u")

if not CREATOR_PRIVATE_KEY:
    print("\nError: CREATOR_PRIVATE_KEY not set in .env file\n")
    exit(1)


async def main():
    signer = EvmWalletSigner.from_private_key(CREATOR_PRIVATE_KEY, network=CHAIN_ID)
    print(f"Creating premint on chain {CHAIN_ID}")
    print(f"  Creator: {signer.get_address()}")

    collection = {
        "contractAdmin": signer.get_address(),
        "contractURI": "ipfs://bafkreiainxen4b4wz4ubylvbhons6rembxdet4a262nf2lziclqvv7au3e",
        "contractName": "Example Premint Collection",
    }

    async with PremintClient.for_chain(CHAIN_ID) as client:
        try:
            result = await client.create_premint(
                signer,
                collection,
                {"tokenURI": TOKEN_URI},
            )
        except PremintError as e:
            logger.error(f"Premint creation failed: {e}")
            return

        print(f"\nCreated premint uid {result.uid}")
        print(f"  Collection: {result.contract_address}")
        print(f"  Collect at: {result.url}")


if __name__ == "__main__":
    asyncio.run(main())
