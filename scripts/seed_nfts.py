# scripts/seed_nfts.py
# usage: python scripts/seed_nfts.py <network> <hemContractId> <nftAmount>
import sys

from hem_sdk.config import get_config
from hem_sdk.hem import Hem
from hem_sdk.roles import NftAdmin


def main(argv):
    network, hem_contract_id = argv[1], argv[2]
    nft_amount = int(argv[3])
    cfg = get_config()

    print(f"seedNFTs({hem_contract_id}, {nft_amount})\r\n")

    admin = Hem(network, hem_contract_id, cfg.admin_account_id, cfg.admin_private_key)
    created = admin.create_account(100)

    seller = Hem(network, hem_contract_id, cfg.seller_account_id, cfg.seller_private_key)
    buyer = Hem(network, hem_contract_id, cfg.buyer_account_id, cfg.buyer_private_key)
    nft_admin_hem = Hem(network, hem_contract_id, created["account_id"], created["private_key"])
    nft_admin = NftAdmin(nft_admin_hem)

    nft_id = nft_admin.create_nft()
    nft_admin.mint_multiple_nfts(nft_id, nft_amount)

    seller.associate_nft(nft_id)
    buyer.associate_nft(nft_id)
    nft_admin_hem.associate_offsets([nft_id])

    nft_admin.grant_kyc(seller.account_id, nft_id)
    nft_admin.grant_kyc(buyer.account_id, nft_id)
    nft_admin.grant_contract_kyc(nft_id)

    # give the whole batch to the seller
    nft_admin_hem.transfer_nfts(seller.account_id, nft_id, range(1, nft_amount + 1))

    print("NFT Admin Account ID:", created["account_id"])
    print("NFT Admin Private Key:", created["private_key"])
    print("NFT ID: ", nft_id)

    return {
        "nft_id": nft_id,
        "nft_admin_account_id": created["account_id"],
        "nft_admin_private_key": created["private_key"],
    }


if __name__ == "__main__":
    main(sys.argv)
