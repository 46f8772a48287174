# scripts/associate_token_to_contract.py
# usage: python scripts/associate_token_to_contract.py <network> <accountId> <privateKey> <nftId> <hemContractId>
import sys

from hem_sdk.hem import Hem


def main(argv):
    network, account_id, private_key, nft_id, hem_contract_id = argv[1:6]

    user = Hem(network, hem_contract_id, account_id, private_key)
    status = user.associate_offsets([nft_id])

    print("The transaction consensus status " + status)
    return status


if __name__ == "__main__":
    main(sys.argv)
