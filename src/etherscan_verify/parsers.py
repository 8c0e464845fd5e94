"""Deployment file and compiler metadata parsers for etherscan-verify library."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .exceptions import DefectiveDeploymentError, DeploymentsNotFoundError, MetadataDecodeError
from .paths import get_chain_id_path
from .types import ContractMetadata, DeploymentRecord

logger = logging.getLogger(__name__)


def parse_deployment_record(file_path: Path) -> DeploymentRecord:
    """
    Parse a hardhat-deploy JSON file.

    Args:
        file_path: Path to contract deployment JSON file

    Returns:
        DeploymentRecord named after the file stem.
        Optional fields (metadata, args, libraries, solcInputHash) are None when absent.

    Raises:
        DefectiveDeploymentError: If the file is not JSON or lacks address or abi
    """
    try:
        with open(file_path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DefectiveDeploymentError(f"Invalid JSON in deployment file {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise DefectiveDeploymentError(f"Deployment file {file_path} is not a JSON object")

    # Extract required fields
    if not data.get("address"):
        raise DefectiveDeploymentError(f"Missing address in deployment file: {file_path}")
    if not isinstance(data.get("abi"), list):
        raise DefectiveDeploymentError(f"Missing abi in deployment file: {file_path}")

    return DeploymentRecord(
        name=file_path.stem,
        address=data["address"],
        abi=data["abi"],
        metadata=data.get("metadata"),
        args=data.get("args"),
        libraries=data.get("libraries"),
        solc_input_hash=data.get("solcInputHash"),
    )


def load_deployments(network_dir: Union[Path, str]) -> Dict[str, DeploymentRecord]:
    """
    Load every deployment record of a network directory.

    Defective files are logged and skipped.

    Args:
        network_dir: Path to deployments/{network} directory

    Returns:
        Dictionary mapping deployment name -> record, in file name order

    Raises:
        DeploymentsNotFoundError: If the directory does not exist
    """
    network_dir = Path(network_dir)
    if not network_dir.is_dir():
        raise DeploymentsNotFoundError(f"Deployments directory not found at {network_dir}")

    deployments: Dict[str, DeploymentRecord] = {}
    for deployment_file in sorted(network_dir.glob("*.json")):
        try:
            record = parse_deployment_record(deployment_file)
        except DefectiveDeploymentError as e:
            logger.error("%s Skipping.", e)
            continue
        deployments[record.name] = record

    return deployments


def read_chain_id(network_dir: Union[Path, str]) -> Optional[str]:
    """
    Read the chain id hardhat-deploy stored next to the deployment records.

    Args:
        network_dir: Path to deployments/{network} directory

    Returns:
        Chain id as a decimal string, or None if no .chainId file exists
    """
    chain_id_path = get_chain_id_path(network_dir)
    if not chain_id_path.exists():
        return None
    return chain_id_path.read_text().strip()


def _require(data: Dict[str, Any], key: str, expected: type, where: str) -> Any:
    value = data.get(key)
    if not isinstance(value, expected):
        raise MetadataDecodeError(f"Invalid compiler metadata: {where}{key} must be a {expected.__name__}")
    return value


def parse_metadata(metadata_string: str) -> ContractMetadata:
    """
    Decode compiler metadata as stored in a deployment record.

    Args:
        metadata_string: Raw metadata JSON string

    Returns:
        ContractMetadata with source contents keyed by path

    Raises:
        MetadataDecodeError: If the string is not JSON or required fields are missing
    """
    try:
        data = json.loads(metadata_string)
    except (TypeError, json.JSONDecodeError) as e:
        raise MetadataDecodeError(f"Compiler metadata is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MetadataDecodeError("Invalid compiler metadata: expected a JSON object")

    language = _require(data, "language", str, "")
    compiler = _require(data, "compiler", dict, "")
    compiler_version = _require(compiler, "version", str, "compiler.")
    settings = _require(data, "settings", dict, "")
    raw_sources = _require(data, "sources", dict, "")

    sources: Dict[str, str] = {}
    for source_path, source in raw_sources.items():
        if not isinstance(source, dict) or not isinstance(source.get("content"), str):
            raise MetadataDecodeError(
                f"Invalid compiler metadata: source {source_path} has no literal content"
            )
        sources[source_path] = source["content"]

    return ContractMetadata(
        language=language,
        compiler_version=compiler_version,
        settings=settings,
        sources=sources,
    )
