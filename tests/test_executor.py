"""
Tests for on-chain premint execution.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from zora_premint.config import REWARD_PER_TOKEN
from zora_premint.exceptions import ChainCallRevertedError
from zora_premint.premint.executor import execute_premint, premint_value
from zora_premint.types import BackendChainName, SignedPremintRecord

EXECUTOR = "0x7777773606e7e46C8Ba8B98C08f5cD218e31d340"
WALLET_ADDRESS = "0x5000000000000000000000000000000000000005"


@pytest.fixture
def record(collection, premint_config):
    return SignedPremintRecord(
        collection=collection,
        premint=premint_config,
        chain_name=BackendChainName.ZORA_TESTNET,
        signature="0x" + "cd" * 65,
    )


@pytest.fixture
def wallet():
    wallet = MagicMock()
    wallet.get_address.return_value = WALLET_ADDRESS
    wallet.write_contract = AsyncMock(return_value="0xtxhash")
    return wallet


def test_premint_value():
    assert premint_value(3, 777000000000000) == 2331000000000000
    assert premint_value(0, REWARD_PER_TOKEN) == 0


@pytest.mark.anyio
async def test_execute_sends_reward_value(wallet, record):
    tx_hash = await execute_premint(
        wallet, EXECUTOR, record, 3, "gm", reward_per_token=777000000000000
    )

    assert tx_hash == "0xtxhash"
    wallet.write_contract.assert_awaited_once()
    call = wallet.write_contract.call_args
    address, abi, method, args = call.args
    assert address == EXECUTOR
    assert method == "premint"
    assert call.kwargs["value"] == 2331000000000000
    assert call.kwargs["account"] == WALLET_ADDRESS
    assert args[2] == bytes.fromhex("cd" * 65)
    assert args[3:] == [3, "gm"]


@pytest.mark.anyio
async def test_execute_with_explicit_account(wallet, record):
    account = "0x6000000000000000000000000000000000000006"
    await execute_premint(
        wallet, EXECUTOR, record, 1, "", REWARD_PER_TOKEN, account=account
    )
    assert wallet.write_contract.call_args.kwargs["account"] == account


@pytest.mark.anyio
async def test_execute_decodes_registry_record(wallet, record):
    await execute_premint(wallet, EXECUTOR, record.to_api(), 1, "", REWARD_PER_TOKEN)

    premint_args = wallet.write_contract.call_args.args[3][1]
    assert premint_args["tokenConfig"]["maxSupply"] == 2**64 - 1
    assert premint_args["tokenConfig"]["mintDuration"] == 604800
    assert premint_args["uid"] == 1


@pytest.mark.anyio
async def test_execute_simulates_first(wallet, record):
    chain = MagicMock()
    chain.simulate_contract = AsyncMock(return_value=1)

    await execute_premint(wallet, EXECUTOR, record, 2, "hi", REWARD_PER_TOKEN, chain=chain)

    sim = chain.simulate_contract.call_args
    write = wallet.write_contract.call_args
    assert sim.args == write.args
    assert sim.kwargs == {"value": 2 * REWARD_PER_TOKEN, "account": WALLET_ADDRESS}


@pytest.mark.anyio
async def test_simulation_revert_prevents_write(wallet, record):
    chain = MagicMock()
    chain.simulate_contract = AsyncMock(
        side_effect=ChainCallRevertedError("premint", "PremintDeleted()")
    )

    with pytest.raises(ChainCallRevertedError) as exc_info:
        await execute_premint(wallet, EXECUTOR, record, 1, "", REWARD_PER_TOKEN, chain=chain)

    assert exc_info.value.reason == "PremintDeleted()"
    wallet.write_contract.assert_not_awaited()


@pytest.mark.anyio
async def test_write_revert_propagates(wallet, record):
    wallet.write_contract.side_effect = ChainCallRevertedError("premint", "MintEnded()")
    with pytest.raises(ChainCallRevertedError, match="MintEnded"):
        await execute_premint(wallet, EXECUTOR, record, 1, "", REWARD_PER_TOKEN)
