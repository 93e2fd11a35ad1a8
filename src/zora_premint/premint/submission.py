"""
Signed premint submission
"""

from typing import Any

from zora_premint.registry import RegistryClient
from zora_premint.types import SignedPremintRecord


async def submit_premint(registry: RegistryClient, record: SignedPremintRecord) -> Any:
    """
    Post a signed premint to the registry.

    Raises:
        RegistrySubmissionError: On any non-200 response
    """
    return await registry.submit_signature(record.to_api())
