"""
PremintClient - Core client for creating, fetching and executing premints
"""

import logging
from typing import Any

from zora_premint.chain import ChainReader, Web3ChainReader
from zora_premint.config import PremintSettings
from zora_premint.exceptions import InvalidSignatureError
from zora_premint.premint import (
    allocate_uid,
    build_token_config,
    execute_premint,
    get_contract_address,
    sign_premint,
    submit_premint,
    verify_premint_signature,
)
from zora_premint.registry import RegistryClient
from zora_premint.signers.base import WalletSigner
from zora_premint.types import (
    CollectionConfig,
    CreatePremintResult,
    MintArguments,
    PremintConfig,
    SignatureValidity,
    SignedPremintRecord,
)
from zora_premint.utils.address import addresses_equal

logger = logging.getLogger(__name__)


class PremintClient:
    """
    Core client for the premint protocol.

    Holds only immutable settings and the registry connection, so one instance
    can serve unrelated flows.
    """

    def __init__(
        self,
        settings: PremintSettings,
        registry: RegistryClient | None = None,
    ) -> None:
        """
        Initialize PremintClient.

        Args:
            settings: Settings for the target chain
            registry: Registry client, defaults to one for settings.api_base
        """
        self._settings = settings
        self._registry = registry or RegistryClient(settings.api_base)
        self._default_chain: Web3ChainReader | None = None

    @classmethod
    def for_chain(cls, chain_id: int, **overrides: Any) -> "PremintClient":
        """Create a client for a supported chain id."""
        return cls(PremintSettings.for_chain(chain_id, **overrides))

    @property
    def settings(self) -> PremintSettings:
        return self._settings

    async def close(self) -> None:
        await self._registry.close()
        if self._default_chain is not None:
            await self._default_chain.close()
            self._default_chain = None

    async def __aenter__(self) -> "PremintClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _chain(self, chain: ChainReader | None) -> ChainReader:
        if chain is not None:
            return chain
        # one reader per client, closed in close()
        if self._default_chain is None:
            self._default_chain = Web3ChainReader(self._settings.chain_id)
        return self._default_chain

    def collect_url(self, contract_address: str, uid: int) -> str:
        """Build the zora.co collect URL for a premint."""
        network = self._settings.network
        prefix = "testnet." if network.is_testnet else ""
        return (
            f"https://{prefix}zora.co/collect:{network.path_name}:{contract_address}"
            f"/premint-{uid}"
        )

    async def create_premint(
        self,
        signer: WalletSigner,
        collection: CollectionConfig | dict[str, Any],
        mint: MintArguments | dict[str, Any],
        chain: ChainReader | None = None,
        account: str | None = None,
        uid: int | None = None,
        deleted: bool = False,
        check_signature: bool = True,
    ) -> CreatePremintResult:
        """
        Sign a new premint and submit it to the registry.

        Args:
            signer: Creator's wallet
            collection: Collection to be deployed
            mint: Token settings; unset fields use the defaults
            chain: Chain reader, defaults to the chain's public RPC
            account: Creator account, defaults to the signer's address
            uid: Explicit uid; allocated by the registry when absent
            deleted: Sign the premint as a tombstone
            check_signature: Verify through the executor before submitting

        Returns:
            CreatePremintResult with the collect URL and registry response

        Raises:
            MissingUidError: If no uid could be allocated
            SigningRejectedError: If the wallet does not sign
            InvalidSignatureError: If pre-submission verification fails
            RegistryRequestError: If a registry call fails
        """
        if isinstance(collection, dict):
            collection = CollectionConfig(**collection)
        chain = self._chain(chain)
        account = account or signer.get_address()

        contract_address = await get_contract_address(
            chain, self._settings.executor_address, collection
        )
        token_config = build_token_config(
            mint,
            royalty_recipient=account,
            fixed_price_minter=self._settings.fixed_price_minter,
        )
        uid = await allocate_uid(
            self._registry,
            self._settings.network.backend_name,
            contract_address,
            explicit_uid=uid,
        )
        premint = PremintConfig(token_config=token_config, uid=uid, version=1, deleted=deleted)

        response = await self._sign_and_submit(
            signer, account, collection, contract_address, premint, chain, check_signature
        )
        return CreatePremintResult(
            url=self.collect_url(contract_address, uid),
            uid=uid,
            contract_address=contract_address,
            premint=response,
        )

    async def delete_premint(
        self,
        signer: WalletSigner,
        contract_address: str,
        uid: int,
        chain: ChainReader | None = None,
        check_signature: bool = True,
    ) -> CreatePremintResult:
        """
        Withdraw a premint by submitting a freshly signed tombstone.

        Raises:
            SigningRejectedError: If the wallet does not sign
            InvalidSignatureError: If pre-submission verification fails
            RegistryRequestError: If a registry call fails
        """
        chain = self._chain(chain)
        record = await self.get_premint(contract_address, uid)
        tombstone = record.premint.model_copy(update={"deleted": True})

        response = await self._sign_and_submit(
            signer,
            signer.get_address(),
            record.collection,
            contract_address,
            tombstone,
            chain,
            check_signature,
        )
        return CreatePremintResult(
            url=self.collect_url(contract_address, uid),
            uid=uid,
            contract_address=contract_address,
            premint=response,
        )

    async def _sign_and_submit(
        self,
        signer: WalletSigner,
        account: str,
        collection: CollectionConfig,
        contract_address: str,
        premint: PremintConfig,
        chain: ChainReader,
        check_signature: bool,
    ) -> Any:
        signature = await sign_premint(
            signer, self._settings.chain_id, contract_address, premint, account=account
        )
        record = SignedPremintRecord(
            collection=collection,
            premint=premint,
            chain_name=self._settings.network.backend_name,
            signature=signature,
        )

        if check_signature:
            validity = await self.is_valid_signature(record, chain)
            if (
                not validity.is_valid
                or not addresses_equal(validity.contract_address, contract_address)
                or not addresses_equal(validity.recovered_signer, account)
            ):
                raise InvalidSignatureError(validity.contract_address, validity.recovered_signer)

        return await submit_premint(self._registry, record)

    async def get_premint(self, contract_address: str, uid: int) -> SignedPremintRecord:
        """Fetch a signed premint from the registry and decode it."""
        data = await self._registry.get_signature(
            self._settings.network.backend_name, contract_address, uid
        )
        return SignedPremintRecord.from_api(data)

    async def is_valid_signature(
        self,
        record: SignedPremintRecord,
        chain: ChainReader | None = None,
    ) -> SignatureValidity:
        """Check a signed premint against the executor contract."""
        return await verify_premint_signature(
            self._chain(chain), self._settings.executor_address, record
        )

    async def execute_premint(
        self,
        record: SignedPremintRecord | dict[str, Any],
        wallet: WalletSigner,
        quantity_to_mint: int,
        mint_comment: str = "",
        account: str | None = None,
        chain: ChainReader | None = None,
    ) -> str:
        """
        Execute a signed premint on-chain, paying the per-token reward.

        Args:
            record: Signed premint, decoded or as returned by the registry
            wallet: Executing wallet
            quantity_to_mint: Number of tokens to mint
            mint_comment: Mint comment
            account: Executing account, defaults to the wallet's address
            chain: When supplied, the call is simulated first

        Returns:
            Transaction hash
        """
        return await execute_premint(
            wallet,
            self._settings.executor_address,
            record,
            quantity_to_mint,
            mint_comment,
            self._settings.reward_per_token,
            account=account,
            chain=chain,
        )
