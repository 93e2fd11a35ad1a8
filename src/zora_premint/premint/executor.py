"""
On-chain premint execution
"""

import logging
from typing import Any

from zora_premint.abi import PREMINT_EXECUTOR_ABI
from zora_premint.chain.base import ChainReader
from zora_premint.signers.base import WalletSigner
from zora_premint.types import SignedPremintRecord
from zora_premint.utils.eip712 import (
    collection_to_chain_args,
    premint_to_chain_args,
    signature_to_bytes,
)

logger = logging.getLogger(__name__)


def premint_value(quantity_to_mint: int, reward_per_token: int) -> int:
    """Native currency (wei) the executor must attach to a premint call."""
    return quantity_to_mint * reward_per_token


async def execute_premint(
    wallet: WalletSigner,
    executor_address: str,
    record: SignedPremintRecord | dict[str, Any],
    quantity_to_mint: int,
    mint_comment: str,
    reward_per_token: int,
    account: str | None = None,
    chain: ChainReader | None = None,
) -> str:
    """
    Deploy the collection (if needed) and mint a signed premint.

    Args:
        wallet: Wallet that sends the transaction
        executor_address: Premint executor address
        record: Signed premint, either decoded or as returned by the registry
        quantity_to_mint: Number of tokens to mint
        mint_comment: Comment attached to the mint
        reward_per_token: Reward owed per minted token, in wei
        account: Executing account, defaults to the wallet's address
        chain: When supplied, the call is simulated before it is sent

    Returns:
        Transaction hash

    Raises:
        ChainCallRevertedError: If simulation or execution reverts
    """
    if isinstance(record, dict):
        record = SignedPremintRecord.from_api(record)

    account = account or wallet.get_address()
    value = premint_value(quantity_to_mint, reward_per_token)
    args = [
        collection_to_chain_args(record.collection),
        premint_to_chain_args(record.premint),
        signature_to_bytes(record.signature),
        quantity_to_mint,
        mint_comment,
    ]

    if chain is not None:
        await chain.simulate_contract(
            executor_address,
            PREMINT_EXECUTOR_ABI,
            "premint",
            args,
            value=value,
            account=account,
        )

    logger.info(
        "Executing premint",
        extra={"uid": record.premint.uid, "quantity": quantity_to_mint, "value": value},
    )
    return await wallet.write_contract(
        executor_address,
        PREMINT_EXECUTOR_ABI,
        "premint",
        args,
        value=value,
        account=account,
    )
