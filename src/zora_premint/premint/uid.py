"""
Premint uid allocation
"""

import logging

from zora_premint.exceptions import MissingUidError
from zora_premint.registry import RegistryClient
from zora_premint.types import BackendChainName

logger = logging.getLogger(__name__)

# uids are allocated from 1; 0 means "not supplied"
UNSET_UID = 0


async def allocate_uid(
    registry: RegistryClient,
    chain_name: BackendChainName,
    contract_address: str,
    explicit_uid: int | None = None,
) -> int:
    """
    Resolve the uid for a new premint.

    A supplied uid is used as-is; otherwise the registry is asked for the next
    unused uid of the collection address. Concurrent allocations for the same
    address may race; the registry rejects duplicates on submission.

    Args:
        registry: Registry client
        chain_name: Registry backend chain name
        contract_address: Deterministic collection address
        explicit_uid: Caller-supplied uid, if any

    Returns:
        Positive uid

    Raises:
        MissingUidError: If no usable uid is available
        RegistryRequestError: If the registry lookup fails
    """
    if explicit_uid is not None and explicit_uid != UNSET_UID:
        if explicit_uid < 0:
            raise MissingUidError(f"Invalid uid: {explicit_uid}")
        return explicit_uid

    response = await registry.get_next_uid(chain_name, contract_address)
    raw_uid = response.get("next_uid") if isinstance(response, dict) else None
    try:
        uid = int(raw_uid)
    except (TypeError, ValueError):
        raise MissingUidError(f"UID is missing but required, registry returned {raw_uid!r}")
    if uid <= UNSET_UID:
        raise MissingUidError(f"UID is missing but required, registry returned {raw_uid!r}")

    logger.debug("Allocated uid", extra={"uid": uid, "contract": contract_address})
    return uid
