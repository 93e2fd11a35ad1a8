"""
Token configuration builder
"""

from typing import Any

from zora_premint.types import (
    ONE_WEEK_SECONDS,
    OPEN_EDITION_MINT_SIZE,
    MintArguments,
    TokenConfig,
)

DEFAULT_MINT_ARGUMENTS: dict[str, Any] = {
    "maxSupply": OPEN_EDITION_MINT_SIZE,
    "maxTokensPerAddress": 0,
    "pricePerToken": 0,
    "mintDuration": ONE_WEEK_SECONDS,
    "mintStart": 0,
    "royaltyMintSchedule": 0,
    "royaltyBPS": 1000,  # 10%
}


def build_token_config(
    mint: MintArguments | dict[str, Any],
    royalty_recipient: str,
    fixed_price_minter: str,
) -> TokenConfig:
    """
    Merge defaults, computed fields and caller overrides into a TokenConfig.

    Merge order: defaults, then the computed ``fixedPriceMinter`` and
    ``royaltyRecipient``, then every field the caller supplied.

    Args:
        mint: Caller-supplied token settings (tokenURI required)
        royalty_recipient: Default royalty recipient, normally the signer
        fixed_price_minter: Fixed price sale strategy for the chain

    Returns:
        TokenConfig
    """
    if isinstance(mint, dict):
        mint = MintArguments(**mint)

    overrides = mint.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
    return TokenConfig(
        **{
            **DEFAULT_MINT_ARGUMENTS,
            "fixedPriceMinter": fixed_price_minter,
            "royaltyRecipient": royalty_recipient,
            **overrides,
        }
    )
