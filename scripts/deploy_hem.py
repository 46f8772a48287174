# scripts/deploy_hem.py
# usage: python scripts/deploy_hem.py <network>
import sys

from hem_sdk.config import get_config
from hem_sdk.deployment import ContractArtifacts, deploy


def main(argv):
    network = argv[1] if len(argv) > 1 else get_config().network
    cfg = get_config()
    if not cfg.admin_account_id or not cfg.admin_private_key:
        raise SystemExit("ADMIN_ACCOUNT_ID / ADMIN_PRIVATE_KEY not set in env")

    artifacts = ContractArtifacts.from_dir(cfg.build_dir)
    ids = deploy(network, cfg.admin_account_id, cfg.admin_private_key, artifacts)

    print("NFTValidator contract ID:", ids["nftValidatorId"])
    print("Hem contract ID         :", ids["hemId"])
    return ids


if __name__ == "__main__":
    main(sys.argv)
