"""
Premint Network Configuration
Centralized configuration for contract addresses and network settings
"""

from typing import Any, Dict

from pydantic import BaseModel

from zora_premint.exceptions import UnsupportedChainError
from zora_premint.types import BackendChainName, NetworkConfig, SupportedChain

PREMINT_API_BASE = "https://api.zora.co/premint/"

# Flat reward paid per minted token to the party executing the premint (wei)
REWARD_PER_TOKEN = 777 * 10**12

# EIP-712 domain of the premint executor
PREMINTER_DOMAIN_NAME = "Preminter"
PREMINTER_DOMAIN_VERSION = "1"

NETWORK_CONFIGS: Dict[SupportedChain, NetworkConfig] = {
    SupportedChain.ZORA: NetworkConfig(
        chain_id=int(SupportedChain.ZORA),
        path_name="zora",
        backend_name=BackendChainName.ZORA_MAINNET,
        is_testnet=False,
    ),
    SupportedChain.ZORA_TESTNET: NetworkConfig(
        chain_id=int(SupportedChain.ZORA_TESTNET),
        path_name="zora",
        backend_name=BackendChainName.ZORA_TESTNET,
        is_testnet=True,
    ),
    SupportedChain.FOUNDRY: NetworkConfig(
        chain_id=int(SupportedChain.FOUNDRY),
        path_name="zora",
        backend_name=BackendChainName.ZORA_TESTNET,
        is_testnet=True,
    ),
}


def resolve_network(chain_id: int) -> NetworkConfig:
    """Get network configuration for a chain id

    Args:
        chain_id: EVM chain id (e.g., 7777777)

    Returns:
        NetworkConfig for the chain

    Raises:
        UnsupportedChainError: If the chain is not supported
    """
    try:
        chain = SupportedChain(chain_id)
    except ValueError:
        raise UnsupportedChainError(chain_id)
    return NETWORK_CONFIGS[chain]


class ChainAddresses:
    """Contract addresses and RPC endpoints per chain"""

    # ZoraCreator1155PremintExecutor proxy, same address on every chain
    PREMINT_EXECUTOR_ADDRESSES: Dict[int, str] = {
        SupportedChain.ZORA: "0x7777773606e7e46C8Ba8B98C08f5cD218e31d340",
        SupportedChain.ZORA_TESTNET: "0x7777773606e7e46C8Ba8B98C08f5cD218e31d340",
        SupportedChain.FOUNDRY: "0x7777773606e7e46C8Ba8B98C08f5cD218e31d340",
    }

    # ZoraCreatorFixedPriceSaleStrategy
    FIXED_PRICE_MINTER_ADDRESSES: Dict[int, str] = {
        SupportedChain.ZORA: "0x04E2516A2c207E84a1839755675dfd8eF6302F0a",
        SupportedChain.ZORA_TESTNET: "0x04E2516A2c207E84a1839755675dfd8eF6302F0a",
        SupportedChain.FOUNDRY: "0x04E2516A2c207E84a1839755675dfd8eF6302F0a",
    }

    RPC_URLS: Dict[int, str] = {
        SupportedChain.ZORA: "https://rpc.zora.energy",
        SupportedChain.ZORA_TESTNET: "https://testnet.rpc.zora.energy",
        SupportedChain.FOUNDRY: "http://127.0.0.1:8545",
    }

    @classmethod
    def get_rpc_url(cls, chain_id: int) -> str | None:
        """Get RPC URL for a chain, or None if not configured"""
        return cls.RPC_URLS.get(chain_id)

    @classmethod
    def get_executor_address(cls, chain_id: int) -> str:
        """Get the premint executor address for a chain

        Raises:
            UnsupportedChainError: If the chain is not supported
        """
        addr = cls.PREMINT_EXECUTOR_ADDRESSES.get(chain_id)
        if addr is None:
            raise UnsupportedChainError(chain_id)
        return addr

    @classmethod
    def get_fixed_price_minter_address(cls, chain_id: int) -> str:
        """Get the fixed price sale strategy address for a chain

        Raises:
            UnsupportedChainError: If the chain is not supported
        """
        addr = cls.FIXED_PRICE_MINTER_ADDRESSES.get(chain_id)
        if addr is None:
            raise UnsupportedChainError(chain_id)
        return addr


def resolve_provider_uri(network: int | str) -> str | None:
    """Resolve a chain id or URL to an RPC provider URI.

    Args:
        network: Chain id (e.g., 7777777) or direct URL

    Returns:
        Provider URI string, or None if not resolvable
    """
    if isinstance(network, str):
        if network.startswith(("http://", "https://", "ws://", "wss://")):
            return network
        network = int(network)
    return ChainAddresses.get_rpc_url(network)


class PremintSettings(BaseModel):
    """Immutable per-chain settings shared by every premint operation"""

    chain_id: int
    network: NetworkConfig
    executor_address: str
    fixed_price_minter: str
    reward_per_token: int = REWARD_PER_TOKEN
    api_base: str = PREMINT_API_BASE

    class Config:
        frozen = True

    @classmethod
    def for_chain(cls, chain_id: int, **overrides: Any) -> "PremintSettings":
        """Build settings for a supported chain.

        Args:
            chain_id: EVM chain id
            **overrides: Replacement values for any settings field

        Raises:
            UnsupportedChainError: If the chain is not supported
        """
        network = resolve_network(chain_id)
        values: dict[str, Any] = {
            "chain_id": int(chain_id),
            "network": network,
            "executor_address": ChainAddresses.get_executor_address(chain_id),
            "fixed_price_minter": ChainAddresses.get_fixed_price_minter_address(chain_id),
        }
        values.update(overrides)
        return cls(**values)
