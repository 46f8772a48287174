# hem_sdk/__init__.py
# Only the pure modules are re-exported here; the Hedera-backed ones
# (config, deployment, hem, roles) start a JVM on import, so import them explicitly.
from .errors import HemError, PriceUnavailable, DeploymentFailure, ContractRejection
from .pricing import (
    get_hbar_price,
    get_tinybar_per_cent,
    tinybar_per_cent_from_usd,
    cents_to_tinybar,
    pad_settlement,
    PURCHASE_PADDING_TINYBARS,
)
from .contract_params import encode_hem_call, encode_function_call, decode_hem_result, decode_revert_reason
from .models import Offset, PurchaseWhitelistEntry

__all__ = [
    "HemError",
    "PriceUnavailable",
    "DeploymentFailure",
    "ContractRejection",
    "get_hbar_price",
    "get_tinybar_per_cent",
    "tinybar_per_cent_from_usd",
    "cents_to_tinybar",
    "pad_settlement",
    "PURCHASE_PADDING_TINYBARS",
    "encode_hem_call",
    "encode_function_call",
    "decode_hem_result",
    "decode_revert_reason",
    "Offset",
    "PurchaseWhitelistEntry",
]
