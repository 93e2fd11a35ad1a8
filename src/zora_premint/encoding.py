"""
Registry wire format for premint configurations.

The registry transports the large token config integers as decimal strings
so they survive JSON number precision limits.
"""

from typing import Any

from zora_premint.types import PremintConfig

# tokenConfig fields carried as decimal strings on the wire
STRING_ENCODED_FIELDS = (
    "maxSupply",
    "pricePerToken",
    "mintStart",
    "mintDuration",
    "maxTokensPerAddress",
)


def encode_premint_for_api(premint: PremintConfig) -> dict[str, Any]:
    """Serialize a PremintConfig for the registry.

    Args:
        premint: PremintConfig instance

    Returns:
        Dict with integer token fields as decimal strings
    """
    data = premint.model_dump(by_alias=True)
    token_config = data["tokenConfig"]
    for field in STRING_ENCODED_FIELDS:
        token_config[field] = str(token_config[field])
    return data


def decode_premint_from_api(data: dict[str, Any]) -> PremintConfig:
    """Convert a registry premint payload back into a PremintConfig.

    Args:
        data: Premint dict as returned by the registry

    Returns:
        PremintConfig with native integer fields
    """
    token_config = dict(data["tokenConfig"])
    for field in STRING_ENCODED_FIELDS:
        token_config[field] = int(token_config[field])
    return PremintConfig(**{**data, "tokenConfig": token_config})
