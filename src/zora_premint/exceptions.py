"""
zora_premint custom exception hierarchy
"""

from typing import Any


class PremintError(Exception):
    """Premint base exception"""

    pass


class ConfigurationError(PremintError):
    """Configuration-related error"""

    pass


class UnsupportedChainError(ConfigurationError):
    """Raised when no network configuration exists for a chain id"""

    def __init__(self, chain_id: int):
        self.chain_id = chain_id
        super().__init__(f"Not configured for chain {chain_id}")


class MissingUidError(PremintError):
    """Raised when neither the caller nor the registry yields a usable uid"""

    pass


class RegistryRequestError(PremintError):
    """Non-success or undecodable response from the premint registry"""

    def __init__(self, status_code: int, body: Any = None, message: str | None = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"Bad response: {status_code}")


class RegistrySubmissionError(RegistryRequestError):
    """Registry rejected a signed premint submission"""

    pass


class SignatureError(PremintError):
    """Signature-related error"""

    pass


class SigningRejectedError(SignatureError):
    """Wallet declined or failed to produce a signature"""

    pass


class InvalidSignatureError(SignatureError):
    """Pre-submission signature verification failed"""

    def __init__(
        self,
        contract_address: str | None = None,
        recovered_signer: str | None = None,
    ):
        self.contract_address = contract_address
        self.recovered_signer = recovered_signer
        super().__init__(
            f"Invalid signature (contract: {contract_address}, "
            f"recovered signer: {recovered_signer})"
        )


class ChainCallError(PremintError):
    """Chain interface call error"""

    pass


class ChainCallRevertedError(ChainCallError):
    """Simulation or execution reverted on-chain"""

    def __init__(self, method: str, reason: str | None = None):
        self.method = method
        self.reason = reason
        super().__init__(f"Call to {method} reverted: {reason or 'unknown reason'}")
