"""
Wallet signer base interface
"""

from abc import ABC, abstractmethod
from typing import Any


class WalletSigner(ABC):
    """
    Abstract base class for wallet signers.

    Responsible for signing premint typed data and sending transactions.
    """

    @abstractmethod
    def get_address(self) -> str:
        """Get the wallet's account address"""
        pass

    @abstractmethod
    async def sign_typed_data(
        self,
        domain: dict[str, Any],
        types: dict[str, Any],
        message: dict[str, Any],
        primary_type: str,
    ) -> str:
        """
        Sign EIP-712 typed data.

        Args:
            domain: EIP-712 domain
            types: Type definitions, including EIP712Domain
            message: Message to sign
            primary_type: Name of the top-level struct in types

        Returns:
            0x-prefixed hex signature

        Raises:
            SigningRejectedError: If the wallet declines or fails to sign
        """
        pass

    @abstractmethod
    async def write_contract(
        self,
        contract_address: str,
        abi: list[dict[str, Any]],
        method: str,
        args: list[Any],
        value: int = 0,
        account: str | None = None,
    ) -> str:
        """
        Execute a contract write transaction.

        Args:
            contract_address: Contract address
            abi: Contract ABI
            method: Method name
            args: Method arguments
            value: Native currency to attach, in wei
            account: Sending account, defaults to the wallet's address

        Returns:
            Transaction hash

        Raises:
            ChainCallRevertedError: If the transaction reverts
        """
        pass
