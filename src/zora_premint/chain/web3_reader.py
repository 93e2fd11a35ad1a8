"""
Web3ChainReader - web3.py backed chain reader
"""

import logging
from typing import Any

from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import ContractLogicError
from web3.middleware import ExtraDataToPOAMiddleware

from zora_premint.chain.base import ChainReader
from zora_premint.config import resolve_provider_uri
from zora_premint.exceptions import ChainCallRevertedError, ConfigurationError
from zora_premint.utils.address import to_checksum_address

logger = logging.getLogger(__name__)


class Web3ChainReader(ChainReader):
    """Chain reader using an async web3 HTTP provider"""

    def __init__(self, network: int | str) -> None:
        """
        Args:
            network: Chain id (e.g., 7777777) or RPC URL
        """
        provider_uri = resolve_provider_uri(network)
        if provider_uri is None:
            raise ConfigurationError(f"No RPC endpoint configured for network: {network}")
        self._w3 = AsyncWeb3(AsyncHTTPProvider(provider_uri))
        self._w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

    async def close(self) -> None:
        """Close the provider's HTTP session"""
        await self._w3.provider.disconnect()

    def _function(self, contract_address: str, abi: list[dict[str, Any]], method: str) -> Any:
        contract = self._w3.eth.contract(address=to_checksum_address(contract_address), abi=abi)
        return getattr(contract.functions, method)

    async def read_contract(
        self,
        contract_address: str,
        abi: list[dict[str, Any]],
        method: str,
        args: list[Any],
    ) -> Any:
        func = self._function(contract_address, abi, method)
        logger.debug("Reading contract", extra={"method": method, "contract": contract_address})
        try:
            return await func(*args).call()
        except ContractLogicError as e:
            raise ChainCallRevertedError(method, str(e)) from e

    async def simulate_contract(
        self,
        contract_address: str,
        abi: list[dict[str, Any]],
        method: str,
        args: list[Any],
        value: int = 0,
        account: str | None = None,
    ) -> Any:
        func = self._function(contract_address, abi, method)
        tx: dict[str, Any] = {"value": value}
        if account:
            tx["from"] = to_checksum_address(account)

        logger.debug(
            "Simulating contract call",
            extra={"method": method, "contract": contract_address, "value": value},
        )
        try:
            return await func(*args).call(tx)
        except ContractLogicError as e:
            logger.error(
                "Contract simulation reverted: %s",
                e,
                extra={"method": method, "contract": contract_address},
            )
            raise ChainCallRevertedError(method, str(e)) from e
