"""
zora_premint - Premint Protocol SDK for Python

Create, sign, submit and execute gasless Zora 1155 premints.
"""

__version__ = "0.1.0"

from zora_premint.clients import PremintClient
from zora_premint.config import (
    REWARD_PER_TOKEN,
    ChainAddresses,
    PremintSettings,
    resolve_network,
)
from zora_premint.exceptions import (
    ChainCallError,
    ChainCallRevertedError,
    ConfigurationError,
    InvalidSignatureError,
    MissingUidError,
    PremintError,
    RegistryRequestError,
    RegistrySubmissionError,
    SignatureError,
    SigningRejectedError,
    UnsupportedChainError,
)
from zora_premint.logging_config import setup_logging
from zora_premint.types import (
    OPEN_EDITION_MINT_SIZE,
    BackendChainName,
    CollectionConfig,
    CreatePremintResult,
    MintArguments,
    NetworkConfig,
    PremintConfig,
    SignatureValidity,
    SignedPremintRecord,
    SupportedChain,
    TokenConfig,
)

__all__ = [
    "__version__",
    "PremintClient",
    # Config
    "REWARD_PER_TOKEN",
    "ChainAddresses",
    "PremintSettings",
    "resolve_network",
    "setup_logging",
    # Types
    "OPEN_EDITION_MINT_SIZE",
    "BackendChainName",
    "CollectionConfig",
    "CreatePremintResult",
    "MintArguments",
    "NetworkConfig",
    "PremintConfig",
    "SignatureValidity",
    "SignedPremintRecord",
    "SupportedChain",
    "TokenConfig",
    # Exceptions
    "PremintError",
    "ConfigurationError",
    "UnsupportedChainError",
    "MissingUidError",
    "RegistryRequestError",
    "RegistrySubmissionError",
    "SignatureError",
    "SigningRejectedError",
    "InvalidSignatureError",
    "ChainCallError",
    "ChainCallRevertedError",
]
