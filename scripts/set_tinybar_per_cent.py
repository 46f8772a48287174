# scripts/set_tinybar_per_cent.py
# usage: python scripts/set_tinybar_per_cent.py <hemContractId> <mockExchangeRate>
#   mockExchangeRate <= 0 -> use the live CoinMarketCap rate
import sys

from hem_sdk.config import get_config
from hem_sdk.hem import Hem
from hem_sdk.pricing import get_tinybar_per_cent
from hem_sdk.roles import PricingAdmin


def main(argv):
    hem_contract_id = argv[1]
    mock_rate = int(argv[2]) if len(argv) > 2 else 0
    cfg = get_config()

    print(f"setTinybarPerCent({hem_contract_id}, {mock_rate})\r\n")

    admin = PricingAdmin(Hem(cfg.network, hem_contract_id, cfg.admin_account_id, cfg.admin_private_key))

    tinybar_per_cent = mock_rate if mock_rate > 0 else get_tinybar_per_cent()
    admin.set_tinybar_per_cent(tinybar_per_cent)

    current = admin.get_tinybar_per_cent()
    print("tinybarPerCent set to:", current)
    return current


if __name__ == "__main__":
    main(sys.argv)
