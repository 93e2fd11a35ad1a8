"""
Premint protocol stages
"""

from zora_premint.premint.builder import DEFAULT_MINT_ARGUMENTS, build_token_config
from zora_premint.premint.executor import execute_premint, premint_value
from zora_premint.premint.signing import sign_premint
from zora_premint.premint.submission import submit_premint
from zora_premint.premint.uid import allocate_uid
from zora_premint.premint.verification import get_contract_address, verify_premint_signature

__all__ = [
    "DEFAULT_MINT_ARGUMENTS",
    "build_token_config",
    "allocate_uid",
    "sign_premint",
    "get_contract_address",
    "verify_premint_signature",
    "submit_premint",
    "execute_premint",
    "premint_value",
]
