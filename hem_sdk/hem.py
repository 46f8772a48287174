# hem_sdk/hem.py
"""
Hem: one Hedera account (id + key + client) talking to one deployed Hem contract.

Plain buyer/seller capabilities live here. Admin capabilities (pricing,
whitelisting, NFT administration) wrap a Hem handle, see roles.py.
"""
import logging

from hedera import (
    AccountBalanceQuery,
    AccountCreateTransaction,
    AccountId,
    ContractCallQuery,
    ContractExecuteTransaction,
    ContractId,
    Hbar,
    NftId,
    PrivateKey,
    TokenAssociateTransaction,
    TokenId,
    TokenNftInfoQuery,
    TopicCreateTransaction,
    TransferTransaction,
)
from jnius import autoclass, JavaException

from .config import build_client
from .contract_params import (
    decode_hem_result,
    decode_revert_reason,
    encode_hem_call,
    is_solidity_address,
    to_address,
)
from .errors import ContractRejection, check_receipt_status, status_from_exception
from .models import Offset, PurchaseWhitelistEntry
from .pricing import pad_settlement

log = logging.getLogger("hem.client")

Arrays = autoclass("java.util.Arrays")
ByteString = autoclass("com.google.protobuf.ByteString")

CONTRACT_GAS = 1_000_000
QUERY_GAS = 500_000
QUERY_PAYMENT_HBAR = 1


# Small compatibility helpers (jnius hands back Java objects, not str/bytes)
def _id_str(value) -> str:
    if isinstance(value, str):
        return value
    return value.toString()


def _java_bytes(value) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    # Java byte[] may come back as signed ints
    return bytes(b & 0xFF for b in value)


def account_id_from_address(address: str) -> str:
    """Solidity (long-zero) address -> '0.0.N'."""
    address = str(address)
    address = address[2:] if address.lower().startswith("0x") else address
    return AccountId.fromSolidityAddress(address).toString()


class Hem:
    def __init__(self, network: str, hem_contract_id, account_id, private_key):
        self.network = network
        self.hem_contract_id = ContractId.fromString(_id_str(hem_contract_id))
        self.account_id = AccountId.fromString(_id_str(account_id))
        self.private_key = PrivateKey.fromString(_id_str(private_key))

        self.client = build_client(network)
        self.client.setOperator(self.account_id, self.private_key)

    def __repr__(self):
        return f"<Hem {self.account_id.toString()} -> {self.hem_contract_id.toString()} ({self.network})>"

    @property
    def solidity_address(self) -> str:
        return to_address(self.account_id.toSolidityAddress())

    # ---------------- id helpers ----------------
    def token_id(self, token_id):
        if not isinstance(token_id, str):
            return token_id
        if is_solidity_address(token_id):
            return TokenId.fromSolidityAddress(to_address(token_id)[2:])
        return TokenId.fromString(token_id)

    def token_address(self, token_id) -> str:
        if isinstance(token_id, str) and is_solidity_address(token_id):
            return to_address(token_id)
        return to_address(self.token_id(token_id).toSolidityAddress())

    def address_of(self, account) -> str:
        """Account id ('0.0.N' / AccountId) or solidity address -> checksum address."""
        if isinstance(account, str) and is_solidity_address(account):
            return to_address(account)
        return to_address(AccountId.fromString(_id_str(account)).toSolidityAddress())

    # ---------------- submission ----------------
    def submit(self, tx) -> str:
        """Freeze, sign with this account's key, execute and wait for the receipt."""
        signed = tx.freezeWith(self.client).sign(self.private_key)
        resp = signed.execute(self.client)
        return self._receipt_status(resp)

    def receipt(self, resp):
        """
        Wait for the receipt of a TransactionResponse.
        A non-SUCCESS status raises ContractRejection carrying any revert reason.
        """
        try:
            receipt = resp.getReceipt(self.client)
        except JavaException as je:
            status = status_from_exception(je)
            if status is None:
                raise
            raise ContractRejection(status, self._revert_reason(resp)) from je
        check_receipt_status(receipt.status.toString())
        return receipt

    def _receipt_status(self, resp) -> str:
        return self.receipt(resp).status.toString()

    def _revert_reason(self, resp) -> str | None:
        try:
            record = resp.getRecordQuery().execute(self.client)
        except JavaException as je:
            log.warning("Could not fetch record for revert reason: %s", je)
            return None
        result = record.contractFunctionResult
        if result is None:
            return None
        return decode_revert_reason(result.errorMessage)

    def execute_contract(self, function: str, *args, gas: int = CONTRACT_GAS, payable_tinybars: int | None = None) -> str:
        params = encode_hem_call(function, *args)
        tx = (
            ContractExecuteTransaction()
            .setContractId(self.hem_contract_id)
            .setGas(gas)
            .setFunctionParameters(ByteString.copyFrom(params))
        )
        if payable_tinybars is not None:
            tx.setPayableAmount(Hbar.fromTinybars(payable_tinybars))

        log.info("%s -> %s.%s", self.account_id.toString(), self.hem_contract_id.toString(), function)
        return self.submit(tx)

    def call_contract(self, function: str, *args, gas: int = QUERY_GAS) -> tuple:
        result = (
            ContractCallQuery()
            .setContractId(self.hem_contract_id)
            .setGas(gas)
            .setFunctionParameters(encode_hem_call(function, *args))
            .setQueryPayment(Hbar(QUERY_PAYMENT_HBAR))
            .execute(self.client)
        )
        return decode_hem_result(function, _java_bytes(result.asBytes()))

    # ---------------- accounts ----------------
    def create_account(self, initial_balance_hbar: float, key: str | None = None) -> dict:
        private_key = PrivateKey.fromString(key) if key else PrivateKey.generateED25519()

        tx = (
            AccountCreateTransaction()
            .setKey(private_key.getPublicKey())
            .setInitialBalance(Hbar.fromTinybars(int(round(float(initial_balance_hbar) * 100_000_000))))
            .execute(self.client)
        )
        receipt = self.receipt(tx)

        return {
            "account_id": receipt.accountId.toString(),
            "private_key": private_key.toString(),
        }

    def create_topic(self) -> str:
        tx = TopicCreateTransaction().execute(self.client)
        return self.receipt(tx).topicId.toString()

    # ---------------- balances ----------------
    def get_hbar_balance(self) -> int:
        """Balance in tinybars."""
        bal = AccountBalanceQuery().setAccountId(self.account_id).execute(self.client)
        return int(bal.hbars.toTinybars())

    def get_nft_balance(self, token_id) -> int:
        bal = AccountBalanceQuery().setAccountId(self.account_id).execute(self.client)
        return token_balance(bal, self.token_id(token_id))

    def get_nft_info(self, token_id, serial: int) -> str:
        """Current owner ('0.0.N') of an NFT."""
        nft_id = NftId(self.token_id(token_id), int(serial))
        infos = TokenNftInfoQuery().setNftId(nft_id).execute(self.client)
        return infos.get(0).accountId.toString()

    # ---------------- HTS ----------------
    def transfer_nft(self, to, token_id, serial: int) -> str:
        return self.transfer_nfts(to, token_id, [serial])

    def transfer_nfts(self, to, token_id, serials) -> str:
        tid = self.token_id(token_id)
        receiver = AccountId.fromString(_id_str(to))

        tx = TransferTransaction()
        for s in serials:
            tx.addNftTransfer(NftId(tid, int(s)), self.account_id, receiver)
        return self.submit(tx)

    def associate_nft(self, token_id) -> str:
        tx = (
            TokenAssociateTransaction()
            .setAccountId(self.account_id)
            .setTokenIds(Arrays.asList(self.token_id(token_id)))
        )
        return self.submit(tx)

    # ---------------- Hem contract ----------------
    def associate_offsets(self, token_ids) -> str:
        return self.execute_contract("associateOffsets", [self.token_address(t) for t in token_ids])

    def get_offset(self, token_id, serial: int) -> Offset:
        values = self.call_contract("getOffset", self.token_address(token_id), serial)
        return Offset.from_result(values, account_id_from_address)

    def get_purchase_whitelist(self, token_id, serial: int) -> PurchaseWhitelistEntry:
        values = self.call_contract("getPurchaseWhitelist", self.token_address(token_id), serial)
        return PurchaseWhitelistEntry.from_result(values, account_id_from_address)

    def get_pending_listings(self, address=None) -> list[str]:
        address = self.address_of(address) if address is not None else self.solidity_address
        (hashes,) = self.call_contract("getPendingListings", address)
        return list(hashes)

    def get_pending_purchases(self, address=None) -> list[str]:
        address = self.address_of(address) if address is not None else self.solidity_address
        (hashes,) = self.call_contract("getPendingPurchases", address)
        return list(hashes)

    def list(self, token_ids, serials, prices) -> str:
        """List offsets for sale; prices are in cents. Lengths are checked by the contract."""
        return self.execute_contract(
            "list_offset",
            self.solidity_address,
            [self.token_address(t) for t in token_ids],
            serials,
            prices,
        )

    def purchase(self, token_ids, serials, price_in_tinybar: int) -> str:
        """Buy whitelisted offsets; the payment is padded by 0.5 HBAR."""
        amount = pad_settlement(price_in_tinybar)
        return self.execute_contract(
            "purchase_offset",
            self.solidity_address,
            [self.token_address(t) for t in token_ids],
            serials,
            payable_tinybars=amount,
        )


def token_balance(balance, token_id) -> int:
    """Amount of `token_id` in an AccountBalance, 0 if the account holds none."""
    tokens = getattr(balance, "tokens", None)
    if tokens is None:
        return 0
    wanted = _id_str(token_id)
    # Java Map -> iterate using entrySet()
    for entry in tokens.entrySet():
        if entry.getKey().toString() == wanted:
            val = entry.getValue()
            return int(val.longValue() if hasattr(val, "longValue") else val)
    return 0


__all__ = ["Hem", "account_id_from_address", "token_balance"]
