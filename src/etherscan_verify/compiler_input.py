"""Reconstruction of the standard JSON compiler input submitted to the explorer."""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .exceptions import MissingSolcInputError
from .paths import get_solc_input_path
from .types import CompilerInput, ContractMetadata, DeploymentRecord


def from_metadata(metadata: ContractMetadata) -> CompilerInput:
    """
    Build a concise compiler input from a contract's metadata.

    Only the sources listed in the metadata are included, each reduced to its
    content (the explorer rejects keccak256/urls fields).

    Args:
        metadata: Parsed compiler metadata

    Returns:
        CompilerInput without settings.compilationTarget
    """
    settings = copy.deepcopy(metadata.settings)
    settings.pop("compilationTarget", None)

    return CompilerInput(
        language=metadata.language,
        settings=settings,
        sources={path: {"content": content} for path, content in metadata.sources.items()},
    )


def load_solc_input(
    solc_inputs_path: Union[Path, str], solc_input_hash: Optional[str], name: str = ""
) -> CompilerInput:
    """
    Load the full compiler input hardhat-deploy persisted for a deployment.

    Args:
        solc_inputs_path: Directory containing {hash}.json files
        solc_input_hash: Content hash from the deployment record
        name: Deployment name, used in error messages

    Returns:
        CompilerInput with every source of the original compilation

    Raises:
        MissingSolcInputError: If the hash is unknown or the file is missing or unreadable
    """
    message = f"Contract {name} was deployed without saving solcInput. Cannot submit to etherscan"
    if not solc_input_hash:
        raise MissingSolcInputError(message)

    solc_input_file = get_solc_input_path(solc_inputs_path, solc_input_hash)
    try:
        with open(solc_input_file) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise MissingSolcInputError(f"{message} ({solc_input_file}: {e})") from e

    if not isinstance(data, dict) or not isinstance(data.get("sources"), dict):
        raise MissingSolcInputError(f"{message} ({solc_input_file} has no sources)")

    return CompilerInput(
        language=data.get("language", "Solidity"),
        settings=data.get("settings", {}),
        sources=data["sources"],
    )


def merge_libraries(
    settings: Dict[str, Any], contract_name_path: str, libraries: Dict[str, str]
) -> Dict[str, Any]:
    """
    Link library addresses into compiler settings.

    Sets settings["libraries"][contract_name_path][library] = address, creating
    the nested mappings as needed. Merging the same libraries twice is a no-op.

    Args:
        settings: Compiler settings (modified in place)
        contract_name_path: "<filepath>:<contract name>"
        libraries: Library name -> deployed address

    Returns:
        The same settings dictionary
    """
    linked = settings.setdefault("libraries", {}).setdefault(contract_name_path, {})
    linked.update(libraries)
    return settings


def build_compiler_input(
    record: DeploymentRecord,
    metadata: ContractMetadata,
    contract_name_path: str,
    use_solc_input: bool = False,
    solc_inputs_path: Optional[Union[Path, str]] = None,
) -> CompilerInput:
    """
    Build the compiler input for one submission attempt.

    Args:
        record: Deployment record
        metadata: Parsed metadata of the record
        contract_name_path: "<filepath>:<contract name>"
        use_solc_input: Use the persisted full compiler input instead of metadata sources
        solc_inputs_path: Directory of persisted compiler inputs (required with use_solc_input)

    Returns:
        Fresh CompilerInput with the record's libraries merged in

    Raises:
        MissingSolcInputError: If full input is requested but unavailable
    """
    if use_solc_input:
        if solc_inputs_path is None:
            raise MissingSolcInputError(
                f"No solcInputs directory configured for {record.name}"
            )
        compiler_input = load_solc_input(solc_inputs_path, record.solc_input_hash, record.name)
    else:
        compiler_input = from_metadata(metadata)

    if record.libraries:
        merge_libraries(compiler_input.settings, contract_name_path, record.libraries)

    return compiler_input
