"""
Shared pytest fixtures:
- fake HTTP responses for the CoinMarketCap quote endpoint
- recording fakes for Hedera transactions / queries (used by the SDK-backed tests)
- a Hem handle wired to a fake client (skipped when the Hedera SDK can't load)
"""
from __future__ import annotations

import pytest
from eth_abi import encode

# hedera-local-node genesis operator key (public, local only)
LOCAL_OPERATOR_KEY = (
    "302e020100300506032b65700422042091132178e72057a1d7528025956fe39b0b847f200ab59b2fdd367017f3087137"
)
HEM_CONTRACT_ID = "0.0.1001"
ACCOUNT_ID = "0.0.1002"


# ---------- HTTP ----------

class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            import requests
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


def cmc_payload(price):
    return {"data": {"4642": {"id": 4642, "symbol": "HBAR", "quote": {"USD": {"price": price}}}}}


@pytest.fixture
def fake_quote(monkeypatch):
    """Patch requests.get inside hem_sdk.pricing; returns the list of recorded calls."""
    from hem_sdk import pricing

    calls = []

    def install(price=None, exc=None, status_code=200):
        def fake_get(url, headers=None, params=None, timeout=None):
            calls.append({"url": url, "headers": headers, "params": params, "timeout": timeout})
            if exc is not None:
                raise exc
            return FakeResponse(cmc_payload(price), status_code)

        monkeypatch.setattr(pricing.requests, "get", fake_get)
        return calls

    return install


# ---------- Hedera fakes ----------

class FakeClient:
    def __init__(self):
        self.operator = None

    def setOperator(self, account_id, private_key):
        self.operator = (account_id, private_key)
        return self


class FakeStatus:
    def __init__(self, name):
        self.name = name

    def toString(self):
        return self.name


class FakeReceipt:
    def __init__(self, status="SUCCESS"):
        self.status = FakeStatus(status)


class FakeFunctionResult:
    def __init__(self, raw: bytes = b"", error_message=None):
        self._raw = raw
        self.errorMessage = error_message

    def asBytes(self):
        return self._raw


class FakeRecord:
    def __init__(self, error_message=None):
        self.contractFunctionResult = FakeFunctionResult(error_message=error_message)


class FakeRecordQuery:
    def __init__(self, record):
        self._record = record

    def execute(self, client):
        return self._record


class FakeTxResponse:
    """TransactionResponse stand-in. `fail_with` is raised from getReceipt."""

    def __init__(self, receipt=None, fail_with=None, record=None):
        self._receipt = receipt or FakeReceipt()
        self._fail_with = fail_with
        self._record = record or FakeRecord()

    def getReceipt(self, client):
        if self._fail_with is not None:
            raise self._fail_with
        return self._receipt

    def getRecordQuery(self):
        return FakeRecordQuery(self._record)


class Recorder:
    """
    Builder-style fake: every setX(...) call is recorded and returns self.
    execute() hands back whatever the test configured.
    """

    instances: list = []
    response = None

    def __init__(self):
        self.calls = {}
        self.signed_with = None
        type(self).instances.append(self)

    def __getattr__(self, name):
        if name.startswith(("set", "add")):
            def setter(*args):
                self.calls.setdefault(name, []).append(args)
                return self
            return setter
        raise AttributeError(name)

    def freezeWith(self, client):
        return self

    def sign(self, key):
        self.signed_with = key
        return self

    def execute(self, client):
        return type(self).response

    def arg(self, name):
        return self.calls[name][-1][0]


def make_recorder(response):
    return type("RecorderFor", (Recorder,), {"instances": [], "response": response})


def abi_result(types, values) -> bytes:
    return encode(list(types), list(values))


def require_hedera_sdk():
    """Skip unless the Java-backed Hedera SDK can actually start."""
    try:
        import jnius  # noqa: F401
        import hedera  # noqa: F401
    except Exception as exc:
        pytest.skip(f"Hedera SDK unavailable: {exc}")


@pytest.fixture
def hem_handle(monkeypatch):
    """A hem_sdk.hem.Hem bound to a FakeClient (real Java id/key types)."""
    require_hedera_sdk()
    from hem_sdk import hem as hem_module

    monkeypatch.setattr(hem_module, "build_client", lambda network: FakeClient())
    return hem_module.Hem("testnet", HEM_CONTRACT_ID, ACCOUNT_ID, LOCAL_OPERATOR_KEY)
