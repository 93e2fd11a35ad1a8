"""
Shared ABI and EIP-712 definitions for the premint executor contract
"""

from typing import Any, List

# EIP-712 primary type signed by the creator
PREMINT_PRIMARY_TYPE = "CreatorAttribution"

# EIP-712 Domain Type
# keccak256("EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)")
EIP712_DOMAIN_TYPE = [
    {"name": "name", "type": "string"},
    {"name": "version", "type": "string"},
    {"name": "chainId", "type": "uint256"},
    {"name": "verifyingContract", "type": "address"},
]

# Field order and types must match the executor's hash reconstruction exactly
PREMINT_EIP712_TYPES = {
    "CreatorAttribution": [
        {"name": "tokenConfig", "type": "TokenCreationConfig"},
        {"name": "uid", "type": "uint32"},
        {"name": "version", "type": "uint32"},
        {"name": "deleted", "type": "bool"},
    ],
    "TokenCreationConfig": [
        {"name": "tokenURI", "type": "string"},
        {"name": "maxSupply", "type": "uint256"},
        {"name": "maxTokensPerAddress", "type": "uint64"},
        {"name": "pricePerToken", "type": "uint96"},
        {"name": "mintStart", "type": "uint64"},
        {"name": "mintDuration", "type": "uint64"},
        {"name": "royaltyMintSchedule", "type": "uint32"},
        {"name": "royaltyBPS", "type": "uint32"},
        {"name": "royaltyRecipient", "type": "address"},
        {"name": "fixedPriceMinter", "type": "address"},
    ],
}

_CONTRACT_CREATION_CONFIG = {
    "name": "contractConfig",
    "type": "tuple",
    "internalType": "struct ContractCreationConfig",
    "components": [
        {"name": "contractAdmin", "type": "address"},
        {"name": "contractURI", "type": "string"},
        {"name": "contractName", "type": "string"},
    ],
}

_PREMINT_CONFIG = {
    "name": "premintConfig",
    "type": "tuple",
    "internalType": "struct PremintConfig",
    "components": [
        {
            "name": "tokenConfig",
            "type": "tuple",
            "internalType": "struct TokenCreationConfig",
            "components": [
                {"name": "tokenURI", "type": "string"},
                {"name": "maxSupply", "type": "uint256"},
                {"name": "maxTokensPerAddress", "type": "uint64"},
                {"name": "pricePerToken", "type": "uint96"},
                {"name": "mintStart", "type": "uint64"},
                {"name": "mintDuration", "type": "uint64"},
                {"name": "royaltyMintSchedule", "type": "uint32"},
                {"name": "royaltyBPS", "type": "uint32"},
                {"name": "royaltyRecipient", "type": "address"},
                {"name": "fixedPriceMinter", "type": "address"},
            ],
        },
        {"name": "uid", "type": "uint32"},
        {"name": "version", "type": "uint32"},
        {"name": "deleted", "type": "bool"},
    ],
}

# ZoraCreator1155PremintExecutor ABI (subset used by this package)
PREMINT_EXECUTOR_ABI: List[dict[str, Any]] = [
    {
        "name": "getContractAddress",
        "type": "function",
        "stateMutability": "view",
        "inputs": [_CONTRACT_CREATION_CONFIG],
        "outputs": [{"name": "", "type": "address"}],
    },
    {
        "name": "isValidSignature",
        "type": "function",
        "stateMutability": "view",
        "inputs": [
            _CONTRACT_CREATION_CONFIG,
            _PREMINT_CONFIG,
            {"name": "signature", "type": "bytes"},
        ],
        "outputs": [
            {"name": "isValid", "type": "bool"},
            {"name": "contractAddress", "type": "address"},
            {"name": "recoveredSigner", "type": "address"},
        ],
    },
    {
        "name": "premint",
        "type": "function",
        "stateMutability": "payable",
        "inputs": [
            _CONTRACT_CREATION_CONFIG,
            _PREMINT_CONFIG,
            {"name": "signature", "type": "bytes"},
            {"name": "quantityToMint", "type": "uint256"},
            {"name": "mintComment", "type": "string"},
        ],
        "outputs": [{"name": "newTokenId", "type": "uint256"}],
    },
]
