# demos/demo_1.py
# End-to-end run against a local Hedera node (hedera-local-node):
#   deploy -> seed NFT -> set rate -> whitelist listing -> list -> whitelist purchase -> purchase
import os

from hem_sdk.config import get_config
from hem_sdk.deployment import ContractArtifacts, deploy
from hem_sdk.hem import Hem
from hem_sdk.pricing import cents_to_tinybar, get_tinybar_per_cent
from hem_sdk.roles import NftAdmin, PricingAdmin, WhitelistAdmin

NETWORK = "localhost"

# hedera-local-node genesis operator
OPERATOR_ID = os.getenv("LOCAL_OPERATOR_ID", "0.0.2")
OPERATOR_KEY = os.getenv(
    "LOCAL_OPERATOR_KEY",
    "302e020100300506032b65700422042091132178e72057a1d7528025956fe39b0b847f200ab59b2fdd367017f3087137",
)

LINE = "-------------------------------------------------------------"


def section(title):
    print("\r\n" + LINE)
    print(title)
    print(LINE)


def hbar(tinybars: int) -> str:
    return f"{tinybars / 100_000_000:.8f} ℏ"


def print_nft_state(pricing, alice, bob, nft_id):
    section("NFTs BALANCE")
    print("contractId  :", pricing.get_contract_nft_balance(nft_id))
    print("alice       :", alice.get_nft_balance(nft_id))
    print("bob         :", bob.get_nft_balance(nft_id))

    section("NFT OWNER")
    print("Owner of NFT1:", alice.get_nft_info(nft_id, 1))


def print_offsets(admin, nft_id, serials):
    for serial in serials:
        print(f"QUERY. >>> admin.get_offset({nft_id}, {serial}); \r\n")
        print(admin.get_offset(nft_id, serial).to_dict(), "\r\n")


def main():
    artifacts = ContractArtifacts.from_dir(get_config().build_dir)
    ids = deploy(NETWORK, OPERATOR_ID, OPERATOR_KEY, artifacts)
    hem_id = ids["hemId"]

    admin = Hem(NETWORK, hem_id, OPERATOR_ID, OPERATOR_KEY)
    pricing, whitelist = PricingAdmin(admin), WhitelistAdmin(admin)

    nft_admin_acct = admin.create_account(100)
    alice_acct = admin.create_account(100)
    bob_acct = admin.create_account(100)

    nft_admin_hem = Hem(NETWORK, hem_id, nft_admin_acct["account_id"], nft_admin_acct["private_key"])
    nft_admin = NftAdmin(nft_admin_hem)
    alice = Hem(NETWORK, hem_id, alice_acct["account_id"], alice_acct["private_key"])
    bob = Hem(NETWORK, hem_id, bob_acct["account_id"], bob_acct["private_key"])

    tinybar_per_cent = get_tinybar_per_cent()
    pricing.set_tinybar_per_cent(tinybar_per_cent)

    nft_id = nft_admin.create_nft()
    nft_admin.mint_multiple_nfts(nft_id, 10)

    alice.associate_nft(nft_id)
    bob.associate_nft(nft_id)
    nft_admin.grant_kyc(alice.account_id, nft_id)
    nft_admin.grant_kyc(bob.account_id, nft_id)
    nft_admin_hem.associate_offsets([nft_id])
    nft_admin.grant_contract_kyc(nft_id)

    serials = [1]
    prices = [5]
    nft_admin_hem.transfer_nfts(alice.account_id, nft_id, serials)
    nfts = [nft_id]

    section("ACCOUNTS")
    print("admin       :", admin.account_id.toString())
    print("nftAdmin    :", nft_admin.account_id.toString())
    print("alice       :", alice.account_id.toString())
    print("bob         :", bob.account_id.toString())
    print("\r\ncontractId  :", hem_id)
    print("\r\ntokenId     :", nft_id)

    section("HBAR BALANCE")
    print("alice    :", hbar(alice.get_hbar_balance()))
    print("bob      :", hbar(bob.get_hbar_balance()))

    print_nft_state(pricing, alice, bob, nft_id)

    section(f" 1 CENT = {tinybar_per_cent} Tinybar")

    print(f"\r\n1. >>> admin.whitelist_list({alice.account_id.toString()}, {nfts}, {serials}, {prices}); \r\n")
    whitelist.whitelist_list(alice.account_id, nfts, serials, prices)
    print_offsets(admin, nft_id, serials)

    print(f"\r\n{LINE}\r\n2. >>> alice.list({nfts}, {serials}, {prices}); \r\n")
    alice.list(nfts, serials, prices)
    print_offsets(admin, nft_id, serials)
    print_nft_state(pricing, alice, bob, nft_id)

    print(f"\r\n{LINE}\r\n3. >>> admin.whitelist_purchase({bob.account_id.toString()}, {nfts}, {serials}); \r\n")
    whitelist.whitelist_purchase(bob.account_id, nfts, serials)

    price_in_tinybar = cents_to_tinybar(prices[0], tinybar_per_cent)
    print(f"\r\n{LINE}\r\n4. >>> bob.purchase({nfts}, {serials}, {price_in_tinybar}); \r\n")
    bob.purchase(nfts, serials, price_in_tinybar)
    print_offsets(admin, nft_id, serials)

    section("HBAR BALANCE")
    print("alice    :", hbar(alice.get_hbar_balance()))
    print("bob      :", hbar(bob.get_hbar_balance()))

    print_nft_state(pricing, alice, bob, nft_id)


if __name__ == "__main__":
    main()
