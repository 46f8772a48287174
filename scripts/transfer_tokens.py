# scripts/transfer_tokens.py
# usage: python scripts/transfer_tokens.py <network> <fromId> <fromKey> <toId> <toKey> <tokenId> <serialLow> <serialHigh>
import sys

from hem_sdk.hem import Hem

# transfers don't touch the Hem contract
NO_CONTRACT = "0.0.0"


def main(argv):
    network, from_id, from_key, to_id, to_key, token_id = argv[1:7]
    low, high = int(argv[7]), int(argv[8])

    sender = Hem(network, NO_CONTRACT, from_id, from_key)
    receiver = Hem(network, NO_CONTRACT, to_id, to_key)

    print("associate:", receiver.associate_nft(token_id))

    serials = list(range(low, high + 1))
    status = sender.transfer_nfts(to_id, token_id, serials)
    print(f"transfer {token_id} {serials} {from_id} -> {to_id}:", status)
    return status


if __name__ == "__main__":
    main(sys.argv)
