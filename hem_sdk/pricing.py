# hem_sdk/pricing.py
"""
USD/HBAR quote -> tinybar-per-cent exchange rate.

Derivation:

    X USD    100 CENT          1 HBAR            CENT
    ------ * -------- * ------------------- = -------
    1 HBAR    1 USD     100,000,000 TINYBAR   TINYBAR

and then invert CENT/TINYBAR to get TINYBAR/CENT.
"""
import os
import math
import logging

import requests
from dotenv import load_dotenv

from .errors import PriceUnavailable

load_dotenv()
log = logging.getLogger("hem.pricing")

CMC_QUOTES_URL = "https://pro-api.coinmarketcap.com/v2/cryptocurrency/quotes/latest"
HEDERA_CMC_ID = 4642

CENT_PER_USD = 100
TINYBAR_PER_HBAR = 10 ** 8

# 0.5 HBAR added on top of every purchase payment
PURCHASE_PADDING_TINYBARS = 50_000_000


def get_hbar_price() -> float | None:
    """
    Latest USD price of one HBAR from CoinMarketCap.
    Returns None when the quote can't be fetched or parsed.
    """
    headers = {"X-CMC_PRO_API_KEY": os.getenv("COINMARKETCAP_API_KEY") or ""}
    params = {"id": HEDERA_CMC_ID}

    try:
        r = requests.get(CMC_QUOTES_URL, headers=headers, params=params, timeout=10)
        r.raise_for_status()
        data = r.json()
        price = data["data"][str(HEDERA_CMC_ID)]["quote"]["USD"]["price"]
        return float(price)
    except Exception:
        log.exception("HBAR price fetch failed")
        return None


def tinybar_per_cent_from_usd(usd_per_hbar: float | None) -> int:
    if usd_per_hbar is None:
        raise PriceUnavailable("No USD/HBAR quote available")

    usd_per_hbar = float(usd_per_hbar)
    if not math.isfinite(usd_per_hbar) or usd_per_hbar <= 0:
        raise PriceUnavailable(f"Invalid USD/HBAR quote: {usd_per_hbar}")

    cent_per_hbar = usd_per_hbar * CENT_PER_USD
    cent_per_tinybar = cent_per_hbar / TINYBAR_PER_HBAR
    if cent_per_tinybar <= 0 or not math.isfinite(1 / cent_per_tinybar):
        raise PriceUnavailable(f"USD/HBAR quote {usd_per_hbar} is too small to price a tinybar")
    tinybar_per_cent = math.floor(1 / cent_per_tinybar)

    if tinybar_per_cent <= 0:
        raise PriceUnavailable(
            f"Quote {usd_per_hbar} USD/HBAR gives less than one tinybar per cent"
        )

    log.info(
        "usd/hbar=%s cent/tinybar=%.3e -> tinybar/cent=%d",
        usd_per_hbar, cent_per_tinybar, tinybar_per_cent,
    )
    return tinybar_per_cent


def get_tinybar_per_cent() -> int:
    """Live exchange rate; raises PriceUnavailable when the feed has nothing usable."""
    return tinybar_per_cent_from_usd(get_hbar_price())


def cents_to_tinybar(cents: int, tinybar_per_cent: int) -> int:
    return int(cents) * int(tinybar_per_cent)


def pad_settlement(price_in_tinybar: int) -> int:
    return int(price_in_tinybar) + PURCHASE_PADDING_TINYBARS
