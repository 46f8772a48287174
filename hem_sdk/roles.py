# hem_sdk/roles.py
"""
Administrative capabilities layered on a Hem handle.

Each role wraps whatever Hem it is given, so one account can hold any mix
of them:

    admin = Hem("testnet", hem_id, admin_id, admin_key)
    pricing, whitelist = PricingAdmin(admin), WhitelistAdmin(admin)
"""
import logging

from hedera import (
    AccountBalanceQuery,
    AccountId,
    TokenCreateTransaction,
    TokenGrantKycTransaction,
    TokenMintTransaction,
    TokenType,
)

from .hem import Hem, token_balance

log = logging.getLogger("hem.roles")

# IPFS CID used as metadata for seeded demo offsets
DEFAULT_NFT_METADATA_CID = "QmTy8fATSsEJazSekXTyZHuqEFu2H9sqYQGmaBvMW8jTxN"


class _Role:
    def __init__(self, hem: Hem):
        self.hem = hem

    @property
    def account_id(self):
        return self.hem.account_id

    def __repr__(self):
        return f"<{type(self).__name__} {self.hem!r}>"


class PricingAdmin(_Role):
    def set_tinybar_per_cent(self, tinybar_per_cent: int) -> str:
        return self.hem.execute_contract("setTinybarPerCent", int(tinybar_per_cent))

    def get_tinybar_per_cent(self) -> int:
        (rate,) = self.hem.call_contract("getTinybarPerCent")
        return int(rate)

    def get_contract_nft_balance(self, token_id) -> int:
        """How many NFTs of `token_id` the Hem contract holds in escrow."""
        bal = (
            AccountBalanceQuery()
            .setContractId(self.hem.hem_contract_id)
            .execute(self.hem.client)
        )
        return token_balance(bal, self.hem.token_id(token_id))


class WhitelistAdmin(_Role):
    def whitelist_list(self, seller, token_ids, serials, prices) -> str:
        return self.hem.execute_contract(
            "whitelist_list",
            self.hem.address_of(seller),
            [self.hem.token_address(t) for t in token_ids],
            serials,
            prices,
        )

    def whitelist_purchase(self, buyer, token_ids, serials) -> str:
        return self.hem.execute_contract(
            "whitelist_purchase",
            self.hem.address_of(buyer),
            [self.hem.token_address(t) for t in token_ids],
            serials,
        )


class NftAdmin(_Role):
    def _create(self, name: str, symbol: str, kyc: bool) -> str:
        hem = self.hem
        tx = (
            TokenCreateTransaction()
            .setTokenName(name)
            .setTokenSymbol(symbol)
            .setTokenType(TokenType.NON_FUNGIBLE_UNIQUE)
            .setSupplyKey(hem.private_key)
            .setTreasuryAccountId(hem.account_id)
        )
        if kyc:
            tx.setKycKey(hem.private_key)

        receipt = hem.receipt(tx.execute(hem.client))
        token_id = receipt.tokenId.toString()
        log.info("NFT collection %s created (kyc=%s)", token_id, kyc)
        return token_id

    def create_nft(self, name: str = "Demo 3", symbol: str = "Test") -> str:
        return self._create(name, symbol, kyc=True)

    def create_nft_no_kyc(self, name: str = "Demo 3", symbol: str = "Test") -> str:
        return self._create(name, symbol, kyc=False)

    def grant_kyc(self, account_id, token_id) -> str:
        account = account_id if not isinstance(account_id, str) else AccountId.fromString(account_id)
        tx = (
            TokenGrantKycTransaction()
            .setAccountId(account)
            .setTokenId(self.hem.token_id(token_id))
        )
        return self.hem.submit(tx)

    def grant_contract_kyc(self, token_id) -> str:
        return self.grant_kyc(self.hem.hem_contract_id.toString(), token_id)

    def mint_multiple_nfts(self, token_id, amount: int, metadata: str = DEFAULT_NFT_METADATA_CID) -> list[int]:
        hem = self.hem
        tx = TokenMintTransaction().setTokenId(hem.token_id(token_id))
        for _ in range(int(amount)):
            tx.addMetadata(metadata.encode("utf-8"))

        receipt = hem.receipt(tx.execute(hem.client))
        # List<Long>; entries may arrive boxed
        return [int(s.longValue()) if hasattr(s, "longValue") else int(s) for s in receipt.serials]
