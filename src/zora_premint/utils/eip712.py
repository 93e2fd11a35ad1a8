"""
EIP-712 message conversion utilities for the premint protocol.

Provides common functions for converting premint models to the EIP-712 and
contract-call formats expected by the premint executor.
"""

from typing import Any

from eth_account.messages import encode_typed_data
from web3 import Web3

from zora_premint.abi import EIP712_DOMAIN_TYPE, PREMINT_EIP712_TYPES, PREMINT_PRIMARY_TYPE
from zora_premint.config import PREMINTER_DOMAIN_NAME, PREMINTER_DOMAIN_VERSION
from zora_premint.types import CollectionConfig, PremintConfig
from zora_premint.utils.address import to_checksum_address


def signature_to_bytes(signature: str) -> bytes:
    """
    Convert a hex signature to bytes.

    Args:
        signature: Hex string, with or without 0x prefix

    Returns:
        Raw signature bytes
    """
    return bytes.fromhex(signature[2:] if signature.startswith("0x") else signature)


def build_premint_domain(chain_id: int, verifying_contract: str) -> dict[str, Any]:
    """Build EIP-712 domain dict scoped to a chain and collection address."""
    return {
        "name": PREMINTER_DOMAIN_NAME,
        "version": PREMINTER_DOMAIN_VERSION,
        "chainId": chain_id,
        "verifyingContract": to_checksum_address(verifying_contract),
    }


def convert_premint_to_eip712_message(premint: PremintConfig) -> dict[str, Any]:
    """
    Convert PremintConfig to an EIP-712 compatible message dict.

    Args:
        premint: PremintConfig instance

    Returns:
        Dict keyed by the on-chain struct field names
    """
    message = premint.model_dump(by_alias=True)
    token_config = message["tokenConfig"]
    token_config["royaltyRecipient"] = to_checksum_address(token_config["royaltyRecipient"])
    token_config["fixedPriceMinter"] = to_checksum_address(token_config["fixedPriceMinter"])
    return message


def build_premint_typed_data(
    chain_id: int,
    verifying_contract: str,
    premint: PremintConfig,
) -> dict[str, Any]:
    """Build the full EIP-712 typed data for a premint signature."""
    return {
        "types": {"EIP712Domain": EIP712_DOMAIN_TYPE, **PREMINT_EIP712_TYPES},
        "domain": build_premint_domain(chain_id, verifying_contract),
        "primaryType": PREMINT_PRIMARY_TYPE,
        "message": convert_premint_to_eip712_message(premint),
    }


def premint_signing_hash(
    chain_id: int,
    verifying_contract: str,
    premint: PremintConfig,
) -> bytes:
    """
    Compute the EIP-712 digest a wallet signs for a premint.

    Returns:
        32-byte keccak256 of the EIP-191 (version 0x01) encoded typed data
    """
    signable = encode_typed_data(
        full_message=build_premint_typed_data(chain_id, verifying_contract, premint)
    )
    return bytes(Web3.keccak(b"\x19" + signable.version + signable.header + signable.body))


def collection_to_chain_args(collection: CollectionConfig) -> dict[str, Any]:
    """Convert CollectionConfig to the ContractCreationConfig call argument."""
    args = collection.model_dump(by_alias=True)
    args["contractAdmin"] = to_checksum_address(args["contractAdmin"])
    return args


def premint_to_chain_args(premint: PremintConfig) -> dict[str, Any]:
    """Convert PremintConfig to the PremintConfig call argument."""
    return convert_premint_to_eip712_message(premint)
