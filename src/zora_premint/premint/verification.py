"""
Premint executor read calls: collection address and signature checks
"""

import logging

from zora_premint.abi import PREMINT_EXECUTOR_ABI
from zora_premint.chain.base import ChainReader
from zora_premint.types import CollectionConfig, SignatureValidity, SignedPremintRecord
from zora_premint.utils.eip712 import (
    collection_to_chain_args,
    premint_to_chain_args,
    signature_to_bytes,
)

logger = logging.getLogger(__name__)


async def get_contract_address(
    chain: ChainReader,
    executor_address: str,
    collection: CollectionConfig,
) -> str:
    """Resolve the deterministic address a collection will be deployed to."""
    return await chain.read_contract(
        executor_address,
        PREMINT_EXECUTOR_ABI,
        "getContractAddress",
        [collection_to_chain_args(collection)],
    )


async def verify_premint_signature(
    chain: ChainReader,
    executor_address: str,
    record: SignedPremintRecord,
) -> SignatureValidity:
    """
    Ask the executor whether a signed premint reconstructs to a valid signer.

    Advisory only: the registry and the executor re-verify downstream.

    Args:
        chain: Chain reader
        executor_address: Premint executor address
        record: Signed premint record

    Returns:
        SignatureValidity with the collection address and recovered signer
    """
    is_valid, contract_address, recovered_signer = await chain.read_contract(
        executor_address,
        PREMINT_EXECUTOR_ABI,
        "isValidSignature",
        [
            collection_to_chain_args(record.collection),
            premint_to_chain_args(record.premint),
            signature_to_bytes(record.signature),
        ],
    )
    if not is_valid:
        logger.warning(
            "Premint signature rejected by executor",
            extra={"uid": record.premint.uid, "recovered_signer": recovered_signer},
        )
    return SignatureValidity(
        is_valid=is_valid,
        contract_address=contract_address,
        recovered_signer=recovered_signer,
    )
