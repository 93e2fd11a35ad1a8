"""
Premint EIP-712 signing
"""

import logging

from zora_premint.exceptions import SigningRejectedError
from zora_premint.signers.base import WalletSigner
from zora_premint.types import PremintConfig
from zora_premint.utils.address import addresses_equal
from zora_premint.utils.eip712 import build_premint_typed_data

logger = logging.getLogger(__name__)


async def sign_premint(
    signer: WalletSigner,
    chain_id: int,
    verifying_contract: str,
    premint: PremintConfig,
    account: str | None = None,
) -> str:
    """
    Sign a premint configuration for one chain and collection address.

    The signature only verifies against the same chain id and
    ``verifying_contract`` (the deterministic collection address).

    Args:
        signer: Wallet capability
        chain_id: Target chain id
        verifying_contract: Deterministic collection address
        premint: Premint configuration
        account: Signing account, defaults to the signer's address

    Returns:
        0x-prefixed hex signature

    Raises:
        SigningRejectedError: If the wallet declines, fails, or cannot sign for account
    """
    if account is not None and not addresses_equal(account, signer.get_address()):
        raise SigningRejectedError(
            f"Signer {signer.get_address()} cannot sign on behalf of {account}"
        )

    typed_data = build_premint_typed_data(chain_id, verifying_contract, premint)
    logger.debug(
        "Requesting premint signature",
        extra={"chain_id": chain_id, "contract": verifying_contract, "uid": premint.uid},
    )
    try:
        return await signer.sign_typed_data(
            typed_data["domain"],
            typed_data["types"],
            typed_data["message"],
            typed_data["primaryType"],
        )
    except SigningRejectedError:
        raise
    except Exception as e:
        logger.warning("Wallet did not sign premint: %s", e, extra={"uid": premint.uid})
        raise SigningRejectedError(f"Wallet failed to sign premint: {e}") from e
