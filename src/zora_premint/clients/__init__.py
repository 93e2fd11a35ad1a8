"""
Premint Clients
"""

from zora_premint.clients.premint_client import PremintClient

__all__ = ["PremintClient"]
