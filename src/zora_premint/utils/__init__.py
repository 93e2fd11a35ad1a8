"""
Premint Utility Functions
"""

from zora_premint.utils.address import addresses_equal, to_checksum_address
from zora_premint.utils.eip712 import (
    build_premint_domain,
    build_premint_typed_data,
    collection_to_chain_args,
    convert_premint_to_eip712_message,
    premint_signing_hash,
    premint_to_chain_args,
    signature_to_bytes,
)

__all__ = [
    "addresses_equal",
    "to_checksum_address",
    "build_premint_domain",
    "build_premint_typed_data",
    "collection_to_chain_args",
    "convert_premint_to_eip712_message",
    "premint_signing_hash",
    "premint_to_chain_args",
    "signature_to_bytes",
]
