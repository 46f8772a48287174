# hem_sdk/errors.py
import re


class HemError(RuntimeError):
    """Base class for everything raised by hem_sdk."""


class PriceUnavailable(HemError):
    """No usable USD/HBAR quote, so no exchange rate can be derived."""


class DeploymentFailure(HemError):
    def __init__(self, step: str, cause: Exception | str):
        self.step = step
        self.cause = cause
        super().__init__(f"Contract deployment failed at {step}: {cause}")


class ContractRejection(HemError):
    """
    Receipt came back with a non-SUCCESS status.
    `status` is the ledger status string, `reason` the decoded revert message (if any),
    both kept exactly as reported.
    """

    def __init__(self, status: str, reason: str | None = None):
        self.status = status
        self.reason = reason
        msg = status if not reason else f"{status}: {reason}"
        super().__init__(msg)


SUCCESS = "SUCCESS"

# ReceiptStatusException text: "receipt for transaction ... raised status CONTRACT_REVERT_EXECUTED"
_STATUS_RE = re.compile(r"raised status ([A-Z_]+)")


def status_from_exception(exc) -> str | None:
    m = _STATUS_RE.search(str(exc))
    return m.group(1) if m else None


def check_receipt_status(status, reason: str | None = None) -> str:
    """Return the status string if it is SUCCESS, else raise ContractRejection."""
    status = str(status)
    if status != SUCCESS:
        raise ContractRejection(status, reason)
    return status
