"""
Premint Registry
"""

from zora_premint.registry.registry_client import RegistryClient

__all__ = ["RegistryClient"]
