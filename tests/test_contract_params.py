"""
ABI encoding of Hem calls and decoding of Hem results.
"""
import pytest
from eth_abi import decode, encode
from web3 import Web3

from hem_sdk.contract_params import (
    HEM_FUNCTIONS,
    ZERO_ADDRESS,
    decode_hem_result,
    decode_revert_reason,
    encode_function_call,
    encode_hem_call,
    encode_hem_constructor,
    function_selector,
    is_solidity_address,
    to_address,
)
from hem_sdk.models import Offset, PurchaseWhitelistEntry

NFT_A = "0x9b1c5d60b87402896542869b162039254f764140"
NFT_B = "0x8ff234f321989aaf9479c42a63b0b28e51a31a20"
SELLER = "0x00000000000000000000000000000000000003ea"   # 0.0.1002
BUYER = "0x00000000000000000000000000000000000003eb"    # 0.0.1003


def _args(name, data):
    types = list(HEM_FUNCTIONS[name])
    assert data[:4] == function_selector(name, types)
    return decode(types, data[4:])


# ---- addresses ----------------------------------------------------------------

def test_to_address_accepts_bare_hex():
    assert to_address("00000000000000000000000000000000000003ea") == Web3.to_checksum_address(SELLER)
    assert to_address(NFT_A) == Web3.to_checksum_address(NFT_A)


@pytest.mark.parametrize("value,expected", [
    (NFT_A, True),
    (NFT_A[2:], True),
    ("0.0.1234", False),
    ("0x1234", False),
    ("zz" * 20, False),
])
def test_is_solidity_address(value, expected):
    assert is_solidity_address(value) is expected


# ---- calls --------------------------------------------------------------------

def test_selector_matches_keccak_signature():
    assert function_selector("setTinybarPerCent", ["uint256"]) == bytes(
        Web3.keccak(text="setTinybarPerCent(uint256)")[:4]
    )


def test_list_offset_parameters_keep_declared_order():
    data = encode_hem_call("list_offset", SELLER, [NFT_A, NFT_B], [1, 2], [5, 1])
    seller, nfts, serials, prices = _args("list_offset", data)

    assert seller.lower() == SELLER
    assert [n.lower() for n in nfts] == [NFT_A, NFT_B]
    assert serials == (1, 2)
    assert prices == (5, 1)


def test_unequal_array_lengths_are_left_to_the_contract():
    # no local parity check; the contract answers "nft length does not match"
    data = encode_hem_call("whitelist_purchase", BUYER, [NFT_A, NFT_B], [1])
    _, nfts, serials = _args("whitelist_purchase", data)
    assert len(nfts) == 2
    assert serials == (1,)


def test_set_tinybar_per_cent_encodes_big_values():
    rate = 2 ** 200
    data = encode_hem_call("setTinybarPerCent", rate)
    assert _args("setTinybarPerCent", data) == (rate,)


def test_get_tinybar_per_cent_has_no_arguments():
    data = encode_hem_call("getTinybarPerCent")
    assert data == function_selector("getTinybarPerCent", [])


def test_wrong_argument_count_raises():
    with pytest.raises(ValueError):
        encode_hem_call("getOffset", NFT_A)


def test_unknown_function_raises():
    with pytest.raises(KeyError):
        encode_hem_call("drain")


def test_generic_function_call_encoding():
    data = encode_function_call("transfer", ["address", "uint256"], [BUYER, 10])
    assert data[:4] == bytes(Web3.keccak(text="transfer(address,uint256)")[:4])
    to, amount = decode(["address", "uint256"], data[4:])
    assert to.lower() == BUYER
    assert amount == 10


def test_constructor_blob_has_no_selector():
    blob = encode_hem_constructor(NFT_A, 17_523_291, False)
    validator, rate, test_mode = decode(["address", "uint256", "bool"], blob)
    assert validator.lower() == NFT_A
    assert rate == 17_523_291
    assert test_mode is False


# ---- results ------------------------------------------------------------------

def test_offset_read_round_trips_listing_values():
    raw = encode(["address", "uint256", "bool", "bool"], [SELLER, 5, True, True])
    offset = Offset.from_result(decode_hem_result("getOffset", raw))

    assert offset.seller == Web3.to_checksum_address(SELLER)
    assert offset.price == 5
    assert offset.hem_approved is True
    assert offset.user_approved is True


def test_never_listed_offset_is_empty():
    raw = encode(["address", "uint256", "bool", "bool"], [ZERO_ADDRESS, 0, False, False])
    offset = Offset.from_result(decode_hem_result("getOffset", raw))

    assert offset.seller == ZERO_ADDRESS
    assert offset.price == 0
    assert offset.to_dict() == {
        "seller": ZERO_ADDRESS,
        "price": 0,
        "hem_approved": False,
        "user_approved": False,
    }


def test_purchase_whitelist_entry():
    raw = encode(["address", "uint256", "bool"], [BUYER, 10, True])
    entry = PurchaseWhitelistEntry.from_result(
        decode_hem_result("getPurchaseWhitelist", raw), to_account=str.lower
    )
    assert entry == PurchaseWhitelistEntry(buyer=BUYER, price=10, hem_approved=True)


def test_decoded_addresses_are_checksummed():
    raw = encode(["address", "uint256", "bool"], [NFT_A, 10, False])
    (buyer, _, _) = decode_hem_result("getPurchaseWhitelist", raw)

    assert buyer == Web3.to_checksum_address(NFT_A)
    assert buyer != NFT_A


def test_pending_listings_decode_as_hex_hashes():
    h = bytes.fromhex("fbac7971afef23474af89e32aa418410da0cd805f97d4d6907475cd4f19f1fbd")
    raw = encode(["bytes32[]"], [[h]])
    (hashes,) = decode_hem_result("getPendingListings", raw)
    assert hashes == ["0xfbac7971afef23474af89e32aa418410da0cd805f97d4d6907475cd4f19f1fbd"]


def test_no_pending_purchases():
    raw = encode(["bytes32[]"], [[]])
    assert decode_hem_result("getPendingPurchases", raw) == ([],)


# ---- revert reasons -----------------------------------------------------------

def _revert(reason: str) -> str:
    return "0x08c379a0" + encode(["string"], [reason]).hex()


@pytest.mark.parametrize("reason", [
    "nft length does not match",
    "not whitelisted",
    "invalid nft",
    "not enough funds to purchase",
])
def test_revert_reason_is_surfaced_verbatim(reason):
    assert decode_revert_reason(_revert(reason)) == reason


def test_revert_reason_from_raw_bytes():
    raw = bytes.fromhex(_revert("invalid nft")[2:])
    assert decode_revert_reason(raw) == "invalid nft"


def test_plain_error_message_passes_through():
    assert decode_revert_reason("INSUFFICIENT_GAS") == "INSUFFICIENT_GAS"


@pytest.mark.parametrize("empty", [None, "", "   "])
def test_empty_error_message(empty):
    assert decode_revert_reason(empty) is None
