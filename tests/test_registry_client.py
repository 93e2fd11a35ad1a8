"""
Tests for RegistryClient and signed premint submission.
"""

import httpx
import pytest

from zora_premint.encoding import encode_premint_for_api
from zora_premint.exceptions import RegistryRequestError, RegistrySubmissionError
from zora_premint.premint.submission import submit_premint
from zora_premint.registry import RegistryClient
from zora_premint.types import BackendChainName, SignedPremintRecord

CONTRACT = "0x00000000000000000000000000000000000000aa"


@pytest.fixture
def record(collection, premint_config):
    return SignedPremintRecord(
        collection=collection,
        premint=premint_config,
        chain_name=BackendChainName.ZORA_TESTNET,
        signature="0x" + "11" * 65,
    )


@pytest.mark.anyio
async def test_submit_posts_wire_format(make_registry, record):
    registry, transport = make_registry(
        {("POST", "/signature"): lambda r: httpx.Response(200, json={"saved": True})}
    )
    response = await submit_premint(registry, record)

    assert response == {"saved": True}
    request = transport.requests[0]
    assert str(request.url) == "https://api.zora.co/premint/signature"
    assert request.headers["content-type"] == "application/json"
    body = transport.json_bodies()[0]
    assert body["chain_name"] == "ZORA-TESTNET"
    assert body["signature"] == record.signature
    assert body["collection"] == {
        "contractAdmin": record.collection.contract_admin,
        "contractURI": "ipfs://c",
        "contractName": "Test",
    }
    assert body["premint"]["tokenConfig"]["maxSupply"] == "18446744073709551615"
    assert body["premint"]["tokenConfig"]["mintDuration"] == "604800"
    assert body["premint"]["tokenConfig"]["royaltyBPS"] == 1000
    assert body["premint"]["uid"] == 1


@pytest.mark.anyio
@pytest.mark.parametrize("status", [201, 400, 409, 500])
async def test_submit_non_200_fails(make_registry, record, status):
    registry, _ = make_registry(
        {("POST", "/signature"): lambda r: httpx.Response(status, text="duplicate uid")}
    )
    with pytest.raises(RegistrySubmissionError) as exc_info:
        await submit_premint(registry, record)
    assert exc_info.value.status_code == status
    assert exc_info.value.body == "duplicate uid"
    assert isinstance(exc_info.value, RegistryRequestError)


@pytest.mark.anyio
async def test_get_signature(make_registry, record):
    wire = record.to_api()
    registry, transport = make_registry(
        {("GET", f"/{CONTRACT}/1"): lambda r: httpx.Response(200, json=wire)}
    )
    data = await registry.get_signature(BackendChainName.ZORA_TESTNET, CONTRACT, 1)

    assert data == wire
    assert data["premint"] == encode_premint_for_api(record.premint)
    assert transport.requests[0].url.path == f"/premint/signature/ZORA-TESTNET/{CONTRACT}/1"


@pytest.mark.anyio
async def test_get_signature_not_found(make_registry):
    registry, _ = make_registry({})
    with pytest.raises(RegistryRequestError) as exc_info:
        await registry.get_signature(BackendChainName.ZORA_MAINNET, CONTRACT, 9)
    assert exc_info.value.status_code == 404


@pytest.mark.anyio
async def test_custom_base_url_and_close():
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json={"next_uid": 2})

    registry = RegistryClient(base_url="http://localhost:3000/premint")
    registry._http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    async with registry:
        await registry.get_next_uid(
            BackendChainName.ZORA_TESTNET, "0xAA00000000000000000000000000000000000000"
        )

    assert seen == [
        "http://localhost:3000/premint/signature/ZORA-TESTNET/"
        "0xaa00000000000000000000000000000000000000/next_uid"
    ]
    assert registry._http_client is None


@pytest.mark.anyio
async def test_get_non_json_body(make_registry):
    registry, _ = make_registry(
        {("GET", "/next_uid"): lambda r: httpx.Response(200, text="<html>gateway</html>")}
    )
    with pytest.raises(RegistryRequestError) as exc_info:
        await registry.get_next_uid(BackendChainName.ZORA_TESTNET, CONTRACT)
    assert exc_info.value.status_code == 200
    assert exc_info.value.body == "<html>gateway</html>"


@pytest.mark.anyio
async def test_submit_non_json_body(make_registry, record):
    registry, _ = make_registry(
        {("POST", "/signature"): lambda r: httpx.Response(200, text="ok")}
    )
    with pytest.raises(RegistrySubmissionError) as exc_info:
        await submit_premint(registry, record)
    assert exc_info.value.body == "ok"
