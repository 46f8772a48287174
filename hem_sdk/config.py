# hem_sdk/config.py
from dotenv import load_dotenv
load_dotenv()

import os
import logging
from dataclasses import dataclass
from hedera import Client, AccountId, PrivateKey
from jnius import autoclass

# configure logging (so prints become manageable)
logging.basicConfig(level=logging.INFO)
log = logging.getLogger("hem.config")

LOCAL_NODE_ADDRESS = "127.0.0.1:50211"
LOCAL_NODE_ACCOUNT = 3
LOCAL_MIRROR_ADDRESS = "127.0.0.1:5600"


@dataclass
class HemConfig:
    network: str = os.getenv("HEM_NETWORK", "testnet")
    build_dir: str = os.getenv("HEM_BUILD_DIR", "build")
    admin_account_id: str | None = os.getenv("ADMIN_ACCOUNT_ID")
    admin_private_key: str | None = os.getenv("ADMIN_PRIVATE_KEY")
    seller_account_id: str | None = os.getenv("SELLER_ACCOUNT_ID")
    seller_private_key: str | None = os.getenv("SELLER_PRIVATE_KEY")
    buyer_account_id: str | None = os.getenv("BUYER_ACCOUNT_ID")
    buyer_private_key: str | None = os.getenv("BUYER_PRIVATE_KEY")
    coinmarketcap_api_key: str | None = os.getenv("COINMARKETCAP_API_KEY")


_cfg = HemConfig()


def get_config() -> HemConfig:
    return _cfg


def build_client(network: str) -> Client:
    """
    Return a Hedera client for mainnet / testnet / localhost.
    The operator is not set here; callers own the signing identity.
    """
    name = (network or "").lower()
    if name == "mainnet":
        return Client.forMainnet()
    if name == "testnet":
        return Client.forTestnet()
    if name == "localhost":
        # Java Map<String, AccountId> for Client.forNetwork
        HashMap = autoclass("java.util.HashMap")
        nodes = HashMap()
        nodes.put(LOCAL_NODE_ADDRESS, AccountId(LOCAL_NODE_ACCOUNT))
        client = Client.forNetwork(nodes)
        Arrays = autoclass("java.util.Arrays")
        client.setMirrorNetwork(Arrays.asList(LOCAL_MIRROR_ADDRESS))
        return client
    raise ValueError(f"Unsupported network '{network}', use mainnet, testnet or localhost")


def operator_client(network: str, account_id: str, private_key: str) -> Client:
    """Client for `network` with the given account set as operator."""
    client = build_client(network)
    client.setOperator(AccountId.fromString(account_id), PrivateKey.fromString(private_key))
    log.info("Hedera client ready for operator %s (network=%s)", account_id, network)
    return client
