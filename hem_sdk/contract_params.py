# hem_sdk/contract_params.py
"""
ABI encoding/decoding for calls into the Hem contract.

Hedera's ContractExecuteTransaction / ContractCallQuery / ContractCreateTransaction
all accept a raw parameter blob, so everything is encoded here with eth_abi and
the SDK only ever sees bytes.
"""
from eth_abi import encode, decode
from web3 import Web3

ZERO_ADDRESS = "0x" + "00" * 20

# Error(string) selector used by solidity `require(cond, "reason")`
REVERT_SELECTOR = "08c379a0"

# name -> input types, in the contract's declared positional order
HEM_FUNCTIONS = {
    "setTinybarPerCent": ("uint256",),
    "getTinybarPerCent": (),
    "whitelist_list": ("address", "address[]", "int64[]", "uint256[]"),
    "list_offset": ("address", "address[]", "int64[]", "uint256[]"),
    "whitelist_purchase": ("address", "address[]", "int64[]"),
    "purchase_offset": ("address", "address[]", "int64[]"),
    "getOffset": ("address", "int64"),
    "getPurchaseWhitelist": ("address", "int64"),
    "getPendingListings": ("address",),
    "getPendingPurchases": ("address",),
    "associateOffsets": ("address[]",),
}

# name -> output types for read-only calls
HEM_OUTPUTS = {
    "getTinybarPerCent": ("uint256",),
    "getOffset": ("address", "uint256", "bool", "bool"),
    "getPurchaseWhitelist": ("address", "uint256", "bool"),
    "getPendingListings": ("bytes32[]",),
    "getPendingPurchases": ("bytes32[]",),
}

HEM_CONSTRUCTOR = ("address", "uint256", "bool")


def to_address(value: str) -> str:
    """'0x'-prefixed or bare 40-hex address -> checksum address."""
    value = str(value).strip()
    if not value.lower().startswith("0x"):
        value = "0x" + value
    return Web3.to_checksum_address(value)


def is_solidity_address(value) -> bool:
    s = str(value).strip().lower()
    s = s[2:] if s.startswith("0x") else s
    if len(s) != 40:
        return False
    try:
        int(s, 16)
    except ValueError:
        return False
    return True


def _normalize(abi_type: str, value):
    if abi_type == "address":
        return to_address(value)
    if abi_type == "address[]":
        return [to_address(v) for v in value]
    if abi_type.endswith("[]"):
        return [int(v) for v in value]
    if abi_type.startswith(("uint", "int")):
        return int(value)
    if abi_type == "bool":
        return bool(value)
    return value


def function_selector(name: str, arg_types) -> bytes:
    signature = f"{name}({','.join(arg_types)})"
    return bytes(Web3.keccak(text=signature)[:4])


def encode_parameters(arg_types, args) -> bytes:
    arg_types = list(arg_types)
    args = list(args)
    if len(arg_types) != len(args):
        raise ValueError(f"Expected {len(arg_types)} arguments, got {len(args)}")
    return encode(arg_types, [_normalize(t, a) for t, a in zip(arg_types, args)])


def encode_function_call(name: str, arg_types, args) -> bytes:
    """Selector + encoded arguments, ready for setFunctionParameters()."""
    return function_selector(name, arg_types) + encode_parameters(arg_types, args)


def encode_hem_call(name: str, *args) -> bytes:
    if name not in HEM_FUNCTIONS:
        raise KeyError(f"Unknown Hem function '{name}'")
    return encode_function_call(name, HEM_FUNCTIONS[name], args)


def encode_hem_constructor(nft_validator_address: str, tinybar_per_cent: int, test_mode: bool = False) -> bytes:
    return encode_parameters(HEM_CONSTRUCTOR, (nft_validator_address, tinybar_per_cent, test_mode))


def decode_function_result(output_types, raw) -> tuple:
    return tuple(decode(list(output_types), bytes(raw)))


def _present(abi_type: str, value):
    # eth_abi hands addresses back lowercase; bytes32 hashes are easier to compare / print as hex
    if abi_type == "address":
        return to_address(value)
    if abi_type == "bytes32[]":
        return ["0x" + bytes(h).hex() for h in value]
    return value


def decode_hem_result(name: str, raw) -> tuple:
    values = decode_function_result(HEM_OUTPUTS[name], raw)
    return tuple(_present(t, v) for t, v in zip(HEM_OUTPUTS[name], values))


def decode_revert_reason(error_message) -> str | None:
    """
    ContractFunctionResult.errorMessage -> human readable reason.
    Reverts come back ABI-encoded as Error(string); anything else is returned as is.
    """
    if error_message is None:
        return None
    if isinstance(error_message, (bytes, bytearray)):
        msg = bytes(error_message).hex()
    else:
        msg = str(error_message).strip()
    if not msg:
        return None

    body = msg[2:] if msg.lower().startswith("0x") else msg
    if body.lower().startswith(REVERT_SELECTOR):
        try:
            (reason,) = decode(["string"], bytes.fromhex(body[len(REVERT_SELECTOR):]))
            return reason
        except Exception:
            return msg
    return msg
