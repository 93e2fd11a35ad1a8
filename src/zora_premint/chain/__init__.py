"""
Chain Interface
"""

from zora_premint.chain.base import ChainReader
from zora_premint.chain.web3_reader import Web3ChainReader

__all__ = ["ChainReader", "Web3ChainReader"]
