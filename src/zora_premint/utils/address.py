"""
Address utility functions
"""

from web3 import Web3


def to_checksum_address(address: str) -> str:
    """Convert an EVM hex address to its EIP-55 checksum form"""
    return Web3.to_checksum_address(address)


def addresses_equal(a: str, b: str) -> bool:
    """Case-insensitive EVM address comparison"""
    return a.lower() == b.lower()
