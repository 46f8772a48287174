# scripts/get_offset.py
# usage: python scripts/get_offset.py <network> <hemContractId> <tokenId> <serialNumber>
import sys

from hem_sdk.config import get_config
from hem_sdk.hem import Hem


def main(argv):
    network, hem_contract_id, token_id, serial = argv[1:5]
    cfg = get_config()

    admin = Hem(network, hem_contract_id, cfg.admin_account_id, cfg.admin_private_key)
    listed = admin.get_offset(token_id, int(serial))

    print("seller: ", listed.seller)
    print("price: ", listed.price)
    print("hemApproved: ", listed.hem_approved)
    print("userApproved: ", listed.user_approved)
    return listed


if __name__ == "__main__":
    main(sys.argv)
