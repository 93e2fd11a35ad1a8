"""
Wallet Signers
"""

from zora_premint.signers.base import WalletSigner
from zora_premint.signers.evm_signer import EvmWalletSigner

__all__ = ["WalletSigner", "EvmWalletSigner"]
