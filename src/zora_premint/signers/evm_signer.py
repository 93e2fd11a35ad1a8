"""
EvmWalletSigner - local-key EVM wallet implementation
"""

import logging
from typing import Any

from eth_account import Account
from eth_account.messages import encode_typed_data
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3
from web3.exceptions import ContractLogicError
from web3.middleware import ExtraDataToPOAMiddleware

from zora_premint.config import resolve_provider_uri
from zora_premint.exceptions import (
    ChainCallRevertedError,
    ConfigurationError,
    SigningRejectedError,
)
from zora_premint.signers.base import WalletSigner
from zora_premint.utils.address import addresses_equal, to_checksum_address

logger = logging.getLogger(__name__)


class EvmWalletSigner(WalletSigner):
    """EVM wallet signer implementation using eth_account and web3.py"""

    def __init__(self, private_key: str, network: int | str | None = None) -> None:
        if not private_key.startswith("0x"):
            private_key = "0x" + private_key
        self._private_key = private_key
        self._network = network
        self._address = self._derive_address(private_key)
        self._async_web3: AsyncWeb3 | None = None
        logger.debug(
            "EvmWalletSigner initialized", extra={"address": self._address, "network": network}
        )

    @classmethod
    def from_private_key(
        cls, private_key: str, network: int | str | None = None
    ) -> "EvmWalletSigner":
        """Create signer from private key.

        Args:
            private_key: Hex private key, with or without 0x prefix
            network: Chain id or RPC URL used for sending transactions
        """
        return cls(private_key, network)

    @staticmethod
    def _derive_address(private_key: str) -> str:
        """Derive EVM address from private key"""
        return Account.from_key(private_key).address

    def get_address(self) -> str:
        return self._address

    def _ensure_async_web3_client(self) -> AsyncWeb3 | None:
        """Lazy initialize async web3 client."""
        if self._network is None:
            return None

        if self._async_web3 is None:
            provider_uri = resolve_provider_uri(self._network)
            if provider_uri is None:
                return None
            w3 = AsyncWeb3(AsyncHTTPProvider(provider_uri))
            w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
            self._async_web3 = w3

        return self._async_web3

    async def sign_typed_data(
        self,
        domain: dict[str, Any],
        types: dict[str, Any],
        message: dict[str, Any],
        primary_type: str,
    ) -> str:
        """Sign EIP-712 typed data."""
        try:
            full_data = {
                "types": types,
                "domain": domain,
                "primaryType": primary_type,
                "message": message,
            }
            encoded = encode_typed_data(full_message=full_data)
            signed = Account.sign_message(encoded, private_key=self._private_key)
            return "0x" + bytes(signed.signature).hex()
        except Exception as e:
            raise SigningRejectedError(f"Failed to sign typed data: {e}") from e

    async def write_contract(
        self,
        contract_address: str,
        abi: list[dict[str, Any]],
        method: str,
        args: list[Any],
        value: int = 0,
        account: str | None = None,
    ) -> str:
        """Execute contract transaction on EVM (async)."""
        w3 = self._ensure_async_web3_client()
        if w3 is None:
            raise ConfigurationError("Web3 provider not configured")

        sender = account or self._address
        if not addresses_equal(sender, self._address):
            raise ConfigurationError(
                f"Cannot send from {sender}: signer holds the key for {self._address}"
            )

        contract = w3.eth.contract(address=to_checksum_address(contract_address), abi=abi)
        func = getattr(contract.functions, method)

        try:
            tx = await func(*args).build_transaction(
                {
                    "from": self._address,
                    "value": value,
                    "nonce": await w3.eth.get_transaction_count(self._address),
                    "chainId": await w3.eth.chain_id,
                }
            )
        except ContractLogicError as e:
            logger.error(
                "Contract write reverted: %s",
                e,
                extra={"method": method, "contract": contract_address},
            )
            raise ChainCallRevertedError(method, str(e)) from e

        signed_tx = w3.eth.account.sign_transaction(tx, private_key=self._private_key)
        tx_hash = await w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        logger.info(
            "Contract write submitted",
            extra={"method": method, "contract": contract_address, "value": value},
        )
        return Web3.to_hex(tx_hash)
