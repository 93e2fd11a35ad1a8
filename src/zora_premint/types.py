"""
Type definitions for the premint protocol
"""

from enum import Enum, IntEnum
from typing import Any, Optional

from pydantic import BaseModel, Field

# maxSupply sentinel for open editions (no cap)
OPEN_EDITION_MINT_SIZE = 2**64 - 1

ONE_WEEK_SECONDS = 60 * 60 * 24 * 7


class SupportedChain(IntEnum):
    """Chains the premint registry and executor are deployed to"""

    ZORA = 7777777
    ZORA_TESTNET = 999
    FOUNDRY = 31337


class BackendChainName(str, Enum):
    """Chain names understood by the premint registry"""

    ZORA_MAINNET = "ZORA-MAINNET"
    ZORA_TESTNET = "ZORA-TESTNET"


class NetworkConfig(BaseModel):
    """Network metadata for a supported chain"""

    chain_id: int = Field(alias="chainId")
    path_name: str = Field(alias="zoraPathChainName")
    backend_name: BackendChainName = Field(alias="zoraBackendChainName")
    is_testnet: bool = Field(alias="isTestnet")

    class Config:
        populate_by_name = True
        frozen = True


class TokenConfig(BaseModel):
    """Token creation configuration signed by the creator"""

    token_uri: str = Field(alias="tokenURI")
    max_supply: int = Field(OPEN_EDITION_MINT_SIZE, alias="maxSupply")
    max_tokens_per_address: int = Field(0, alias="maxTokensPerAddress")
    price_per_token: int = Field(0, alias="pricePerToken")
    mint_start: int = Field(0, alias="mintStart")
    mint_duration: int = Field(ONE_WEEK_SECONDS, alias="mintDuration")
    royalty_mint_schedule: int = Field(0, alias="royaltyMintSchedule")
    royalty_bps: int = Field(1000, alias="royaltyBPS")
    royalty_recipient: str = Field(alias="royaltyRecipient")
    fixed_price_minter: str = Field(alias="fixedPriceMinter")

    class Config:
        populate_by_name = True


class MintArguments(BaseModel):
    """Caller-supplied token settings; unset fields fall back to defaults"""

    token_uri: str = Field(alias="tokenURI")
    max_supply: Optional[int] = Field(None, alias="maxSupply")
    max_tokens_per_address: Optional[int] = Field(None, alias="maxTokensPerAddress")
    price_per_token: Optional[int] = Field(None, alias="pricePerToken")
    mint_start: Optional[int] = Field(None, alias="mintStart")
    mint_duration: Optional[int] = Field(None, alias="mintDuration")
    royalty_mint_schedule: Optional[int] = Field(None, alias="royaltyMintSchedule")
    royalty_bps: Optional[int] = Field(None, alias="royaltyBPS")
    royalty_recipient: Optional[str] = Field(None, alias="royaltyRecipient")
    fixed_price_minter: Optional[str] = Field(None, alias="fixedPriceMinter")

    class Config:
        populate_by_name = True


class CollectionConfig(BaseModel):
    """Contract creation configuration for a not-yet-deployed collection"""

    contract_admin: str = Field(alias="contractAdmin")
    contract_uri: str = Field(alias="contractURI")
    contract_name: str = Field(alias="contractName")

    class Config:
        populate_by_name = True


class PremintConfig(BaseModel):
    """Premint configuration covered by the creator's signature"""

    token_config: TokenConfig = Field(alias="tokenConfig")
    uid: int
    version: int = 1
    deleted: bool = False

    class Config:
        populate_by_name = True


class SignedPremintRecord(BaseModel):
    """Signed premint as persisted by the registry"""

    collection: CollectionConfig
    premint: PremintConfig
    chain_name: BackendChainName
    signature: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "SignedPremintRecord":
        """Decode a registry response with string-encoded integers"""
        from zora_premint.encoding import decode_premint_from_api

        return cls(
            collection=CollectionConfig(**data["collection"]),
            premint=decode_premint_from_api(data["premint"]),
            chain_name=data["chain_name"],
            signature=data["signature"],
        )

    def to_api(self) -> dict[str, Any]:
        """Encode for the registry, integers as decimal strings"""
        from zora_premint.encoding import encode_premint_for_api

        return {
            "collection": self.collection.model_dump(by_alias=True),
            "premint": encode_premint_for_api(self.premint),
            "chain_name": self.chain_name.value,
            "signature": self.signature,
        }


class SignatureValidity(BaseModel):
    """Result of the executor's isValidSignature check"""

    is_valid: bool = Field(alias="isValid")
    contract_address: str = Field(alias="contractAddress")
    recovered_signer: str = Field(alias="recoveredSigner")

    class Config:
        populate_by_name = True


class CreatePremintResult(BaseModel):
    """Outcome of a create_premint flow"""

    url: str
    uid: int
    contract_address: str = Field(alias="newContractAddress")
    premint: Any = None

    class Config:
        populate_by_name = True
