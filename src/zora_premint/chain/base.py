"""
Chain reader base interface
"""

from abc import ABC, abstractmethod
from typing import Any


class ChainReader(ABC):
    """
    Abstract base class for read-only chain access.

    Responsible for view calls and dry-run simulation against deployed contracts.
    """

    @abstractmethod
    async def read_contract(
        self,
        contract_address: str,
        abi: list[dict[str, Any]],
        method: str,
        args: list[Any],
    ) -> Any:
        """
        Call a view function.

        Args:
            contract_address: Contract address
            abi: Contract ABI
            method: Method name
            args: Method arguments

        Returns:
            Decoded return value

        Raises:
            ChainCallRevertedError: If the call reverts
        """
        pass

    @abstractmethod
    async def simulate_contract(
        self,
        contract_address: str,
        abi: list[dict[str, Any]],
        method: str,
        args: list[Any],
        value: int = 0,
        account: str | None = None,
    ) -> Any:
        """
        Dry-run a state-changing call without sending a transaction.

        Args:
            contract_address: Contract address
            abi: Contract ABI
            method: Method name
            args: Method arguments
            value: Native currency to attach, in wei
            account: Account the call is simulated from

        Returns:
            Decoded return value of the simulated call

        Raises:
            ChainCallRevertedError: If the simulation reverts
        """
        pass
