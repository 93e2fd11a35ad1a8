"""
Pytest configuration and shared fixtures
"""

import json
from typing import Any, Callable

import httpx
import pytest
from eth_account import Account
from eth_account.messages import encode_typed_data
from web3 import Web3

from zora_premint.chain.base import ChainReader
from zora_premint.config import PremintSettings
from zora_premint.registry import RegistryClient
from zora_premint.signers import EvmWalletSigner
from zora_premint.types import (
    CollectionConfig,
    PremintConfig,
    SupportedChain,
    TokenConfig,
)
from zora_premint.utils.eip712 import build_premint_typed_data

MOCK_EVM_PRIVATE_KEY = "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"
MOCK_EVM_ADDRESS = Account.from_key(MOCK_EVM_PRIVATE_KEY).address


class FakePremintExecutor(ChainReader):
    """In-memory stand-in for the premint executor contract.

    Derives collection addresses from a hash of the collection config and
    recovers signers the way the contract does: the signature is valid when
    it recovers to the collection's contractAdmin.
    """

    def __init__(self, chain_id: int) -> None:
        self.chain_id = chain_id
        self.calls: list[tuple[str, list[Any]]] = []

    @staticmethod
    def address_for(collection: dict[str, Any]) -> str:
        digest = Web3.keccak(
            text=f"{collection['contractAdmin'].lower()}|{collection['contractURI']}|"
            f"{collection['contractName']}"
        )
        return Web3.to_checksum_address("0x" + bytes(digest[-20:]).hex())

    async def read_contract(self, contract_address, abi, method, args):
        self.calls.append((method, args))
        if method == "getContractAddress":
            return self.address_for(args[0])
        if method == "isValidSignature":
            collection, premint_args, signature = args
            contract_address = self.address_for(collection)
            premint = PremintConfig(**premint_args)
            signable = encode_typed_data(
                full_message=build_premint_typed_data(self.chain_id, contract_address, premint)
            )
            recovered = Account.recover_message(signable, signature=signature)
            is_valid = recovered.lower() == collection["contractAdmin"].lower()
            return is_valid, contract_address, recovered
        raise AssertionError(f"unexpected read: {method}")

    async def simulate_contract(self, contract_address, abi, method, args, value=0, account=None):
        self.calls.append((method, args))
        return 1


class RecordingTransport:
    """httpx.MockTransport handler that records requests and replies from a route table."""

    def __init__(self, routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]]):
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for (method, suffix), responder in self.routes.items():
            if request.method == method and request.url.path.endswith(suffix):
                return responder(request)
        return httpx.Response(404, json={"error": "not found"})

    def json_bodies(self, method: str = "POST") -> list[Any]:
        return [json.loads(r.content) for r in self.requests if r.method == method]


@pytest.fixture
def mock_evm_private_key():
    """Mock EVM private key for tests"""
    return MOCK_EVM_PRIVATE_KEY


@pytest.fixture
def signer():
    return EvmWalletSigner.from_private_key(MOCK_EVM_PRIVATE_KEY)


@pytest.fixture
def foundry_settings():
    return PremintSettings.for_chain(SupportedChain.FOUNDRY)


@pytest.fixture
def fake_executor(foundry_settings):
    return FakePremintExecutor(foundry_settings.chain_id)


@pytest.fixture
def collection():
    return CollectionConfig(
        contract_admin=MOCK_EVM_ADDRESS,
        contract_uri="ipfs://c",
        contract_name="Test",
    )


@pytest.fixture
def premint_config(foundry_settings):
    return PremintConfig(
        token_config=TokenConfig(
            token_uri="ipfs://t",
            royalty_recipient=MOCK_EVM_ADDRESS,
            fixed_price_minter=foundry_settings.fixed_price_minter,
        ),
        uid=1,
    )


@pytest.fixture
def make_registry():
    """Build a RegistryClient backed by a RecordingTransport."""

    def _make(routes) -> tuple[RegistryClient, RecordingTransport]:
        transport = RecordingTransport(routes)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
        client = RegistryClient(http_client=http_client)
        return client, transport

    return _make
