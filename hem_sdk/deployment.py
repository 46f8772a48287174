# hem_sdk/deployment.py
import os
import json
import logging
from dataclasses import dataclass

from hedera import (
    Client,
    FileCreateTransaction,
    FileAppendTransaction,
    ContractCreateTransaction,
)
from jnius import autoclass

from .config import operator_client
from .contract_params import encode_hem_constructor
from .errors import DeploymentFailure

log = logging.getLogger("hem.deployment")

Duration = autoclass("java.time.Duration")

MAX_APPEND_CHUNKS = 25
APPEND_VALID_SECONDS = 180   # 3 minutes

NFT_VALIDATOR_GAS = 100_000
HEM_GAS = 3_000_000
DEFAULT_TINYBAR_PER_CENT = 17_523_291


def load_contract_artifact(path: str) -> str:
    """
    Reads a compiled contract JSON and returns its hex bytecode (no 0x prefix).
    Accepts {"bytecode": "..."} and {"bytecode": {"object": "..."}}.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            artifact = json.load(f)
    except FileNotFoundError:
        log.error("Artifact file not found: %s", path)
        raise

    bytecode = artifact.get("bytecode")
    if isinstance(bytecode, dict):
        bytecode = bytecode.get("object")
    if not bytecode or not isinstance(bytecode, str):
        raise ValueError(f"Bytecode not found or invalid in artifact: {path}")

    return bytecode[2:] if bytecode.startswith("0x") else bytecode


@dataclass
class ContractArtifacts:
    hem_bytecode: str
    nft_validator_bytecode: str

    @classmethod
    def from_dir(cls, build_dir: str) -> "ContractArtifacts":
        return cls(
            hem_bytecode=load_contract_artifact(os.path.join(build_dir, "Hem.json")),
            nft_validator_bytecode=load_contract_artifact(os.path.join(build_dir, "NFTValidator.json")),
        )


def deploy_contract(client: Client, bytecode: str, gas: int, constructor_params: bytes | None = None):
    """
    Upload bytecode as a Hedera file (create + append) and instantiate the contract.
    Returns the Java ContractId. Any failing step raises DeploymentFailure.
    """
    try:
        file_create = (
            FileCreateTransaction()
            .setKeys(client.getOperatorPublicKey())
            .execute(client)
        )
        bytecode_file_id = file_create.getReceipt(client).fileId
    except Exception as exc:
        raise DeploymentFailure("file create", exc) from exc
    log.info("Bytecode file created: %s", bytecode_file_id.toString())

    try:
        file_append = (
            FileAppendTransaction()
            .setFileId(bytecode_file_id)
            .setContents(bytecode)
            .setMaxChunks(MAX_APPEND_CHUNKS)
            .setTransactionValidDuration(Duration.ofSeconds(APPEND_VALID_SECONDS))
            .execute(client)
        )
        file_append.getReceipt(client)
    except Exception as exc:
        raise DeploymentFailure("file append", exc) from exc

    try:
        tx = ContractCreateTransaction().setBytecodeFileId(bytecode_file_id).setGas(gas)
        if constructor_params:
            tx.setConstructorParameters(constructor_params)
        contract_id = tx.execute(client).getReceipt(client).contractId
    except Exception as exc:
        raise DeploymentFailure("contract create", exc) from exc

    log.info("Contract deployed: %s (gas=%d)", contract_id.toString(), gas)
    return contract_id


def deploy(
    network: str,
    operator_id: str,
    operator_key: str,
    artifacts: ContractArtifacts,
    tinybar_per_cent: int = DEFAULT_TINYBAR_PER_CENT,
    test_mode: bool = False,
) -> dict:
    """Deploy NFTValidator, then Hem pointing at it."""
    client = operator_client(network, operator_id, operator_key)

    nft_validator_id = deploy_contract(client, artifacts.nft_validator_bytecode, NFT_VALIDATOR_GAS)

    constructor = encode_hem_constructor(
        nft_validator_id.toSolidityAddress(), tinybar_per_cent, test_mode
    )
    hem_id = deploy_contract(client, artifacts.hem_bytecode, HEM_GAS, constructor)

    return {
        "nftValidatorId": nft_validator_id.toString(),
        "hemId": hem_id.toString(),
    }
