"""Main API for etherscan-verify: per-contract submission and batch driver."""

import json
import logging
import threading
from pathlib import Path
from typing import Dict, Optional, Union

from .arguments import encode_constructor_arguments
from .compiler_input import build_compiler_input
from .config import VerificationConfig
from .exceptions import (
    MetadataDecodeError,
    MissingMetadataError,
    UnsupportedNetworkError,
    VerificationError,
    VerificationFailedError,
)
from .explorer import ExplorerClient, resolve_host
from .licenses import extract_primary_license, resolve_license
from .logs import SUCCESS
from .parsers import load_deployments, parse_metadata, read_chain_id
from .paths import get_network_dir, get_solc_inputs_dir
from .polling import poll_verification_status
from .types import ContractOutcome, DeploymentRecord, JobResult, VerificationJob, VerificationRequest

logger = logging.getLogger(__name__)

SOLIDITY_ISSUE_URL = "https://github.com/ethereum/solidity/issues/9573"


def prepare_request(
    record: DeploymentRecord,
    config: VerificationConfig,
    use_solc_input: bool = False,
    solc_inputs_path: Optional[Union[Path, str]] = None,
) -> VerificationRequest:
    """
    Build the verification request for a deployment without touching the network.

    Args:
        record: Deployment record
        config: Batch configuration (license options)
        use_solc_input: Submit the persisted full compiler input instead of metadata sources
        solc_inputs_path: Directory of persisted compiler inputs

    Returns:
        VerificationRequest ready to be submitted

    Raises:
        MissingMetadataError: If the record has no metadata
        MetadataDecodeError: If the metadata is malformed
        AmbiguousCompilationTargetError: If the compilation target is not unique
        MissingLicenseError, LicenseMismatchError, UnsupportedLicenseError: License problems
        MissingSolcInputError: If full input is requested but unavailable
        ArgumentEncodingError: If constructor arguments do not match the ABI
    """
    if not record.metadata:
        raise MissingMetadataError(
            f"Contract {record.name} was deployed without saving metadata. "
            "Cannot submit to etherscan"
        )
    metadata = parse_metadata(record.metadata)

    contract_filepath, contract_name = metadata.compilation_target
    contract_name_path = f"{contract_filepath}:{contract_name}"

    if contract_filepath not in metadata.sources:
        raise MetadataDecodeError(
            f"Compilation target {contract_filepath} is not among the metadata sources"
        )
    source_license = extract_primary_license(metadata.sources[contract_filepath])
    license, license_type = resolve_license(source_license, config.license, config.force_license)

    compiler_input = build_compiler_input(
        record, metadata, contract_name_path, use_solc_input, solc_inputs_path
    )

    constructor_arguments = None
    if record.args is not None:
        constructor_arguments = encode_constructor_arguments(record.abi, record.args)
    else:
        logger.info("no args found, assuming empty constructor...")

    return VerificationRequest(
        name=record.name,
        address=record.address,
        contract_name_path=contract_name_path,
        compiler_version=metadata.compiler_version,
        license=license,
        license_type=license_type,
        compiler_input=compiler_input,
        constructor_arguments=constructor_arguments,
        use_solc_input=use_solc_input,
    )


def verify_contract(
    client: ExplorerClient,
    record: DeploymentRecord,
    config: VerificationConfig,
    use_solc_input: bool = False,
    solc_inputs_path: Optional[Union[Path, str]] = None,
    cancel_event: Optional[threading.Event] = None,
) -> ContractOutcome:
    """
    Verify one deployment: skip if already verified, submit, then poll.

    Args:
        client: Explorer client for the deployment's network
        record: Deployment record
        config: Batch configuration
        use_solc_input: Submit the persisted full compiler input
        solc_inputs_path: Directory of persisted compiler inputs
        cancel_event: Set it to stop polling

    Returns:
        ContractOutcome.ALREADY_VERIFIED or ContractOutcome.VERIFIED

    Raises:
        VerificationFailedError: If the job ends in failure, times out or is cancelled
        VerificationError: Any other per-contract error (see prepare_request)
    """
    name = record.name

    if client.is_verified(record.address):
        logger.info("already verified: %s (%s), skipping.", name, record.address)
        return ContractOutcome.ALREADY_VERIFIED

    request = prepare_request(record, config, use_solc_input, solc_inputs_path)

    logger.info("verifying %s (%s) ...", name, record.address)
    guid = client.submit(request.to_form(config.api_key))

    job = VerificationJob(guid=guid, contract_name_path=request.contract_name_path)
    logger.info("waiting for result...")
    poll_verification_status(
        client,
        job,
        interval=config.poll_interval,
        max_attempts=config.max_poll_attempts,
        cancel_event=cancel_event,
    )

    if job.result == JobResult.SUCCESS:
        logger.log(SUCCESS, " => contract %s is now verified", name)
        return ContractOutcome.VERIFIED

    if job.result == JobResult.FAILURE:
        logger.error(json.dumps(request.redacted(), indent=2))

    raise VerificationFailedError(f"Failed to verify contract {name}: {job.message}")


def _verify_with_fallback(
    client: ExplorerClient,
    name: str,
    record: DeploymentRecord,
    config: VerificationConfig,
    solc_inputs_path: Optional[Union[Path, str]],
    cancel_event: Optional[threading.Event],
) -> ContractOutcome:
    try:
        return verify_contract(client, record, config, False, solc_inputs_path, cancel_event)
    except VerificationFailedError as e:
        logger.error("%s", e)
        if cancel_event is not None and cancel_event.is_set():
            return ContractOutcome.FAILED
        if not config.fallback_on_solc_input:
            logger.info(
                "Etherscan sometime fails to verify when only metadata sources are given. "
                "See %s. You can add the option --solc-input to try with full solc-input "
                "sources. This will include all contract source in the etherscan result, "
                "even the one not relevant to the contract being verified",
                SOLIDITY_ISSUE_URL,
            )
            return ContractOutcome.FAILED
    except VerificationError as e:
        logger.error("%s: %s. Skipping.", name, e)
        return ContractOutcome.REJECTED

    logger.info(
        "Falling back on solcInput. etherscan seems to sometime require full solc-input "
        "with all source files, even though this should not be needed. See %s",
        SOLIDITY_ISSUE_URL,
    )
    try:
        return verify_contract(client, record, config, True, solc_inputs_path, cancel_event)
    except VerificationFailedError as e:
        logger.error("%s", e)
        return ContractOutcome.FAILED
    except VerificationError as e:
        logger.error("%s: %s. Skipping.", name, e)
        return ContractOutcome.REJECTED


def submit_sources(
    deployments: Dict[str, DeploymentRecord],
    chain_id: Union[str, int],
    solc_inputs_path: Optional[Union[Path, str]] = None,
    config: Optional[VerificationConfig] = None,
    client: Optional[ExplorerClient] = None,
    cancel_event: Optional[threading.Event] = None,
) -> Dict[str, ContractOutcome]:
    """
    Submit every deployment of a network for verification, one after the other.

    A failing contract never stops the batch; only an unsupported chain does.

    Args:
        deployments: Deployment name -> record, processed in this order
        chain_id: Chain id the deployments live on
        solc_inputs_path: Directory of persisted compiler inputs (for fallback)
        config: Batch configuration (defaults to VerificationConfig.from_env())
        client: Explorer client (defaults to one for the chain's host)
        cancel_event: Set it to stop polling and skip remaining contracts

    Returns:
        Deployment name -> outcome, for every contract processed

    Raises:
        UnsupportedNetworkError: If no explorer is known for chain_id
    """
    if config is None:
        config = VerificationConfig.from_env()

    host = resolve_host(chain_id)
    if client is None:
        client = ExplorerClient(host, config.api_key, timeout=config.request_timeout)

    outcomes: Dict[str, ContractOutcome] = {}
    for name, record in deployments.items():
        outcomes[name] = _verify_with_fallback(
            client, name, record, config, solc_inputs_path, cancel_event
        )
        if cancel_event is not None and cancel_event.is_set():
            logger.error("Verification cancelled, skipping remaining contracts.")
            break

    return outcomes


def submit_sources_from_directory(
    deployments_dir: Union[Path, str],
    network: Optional[str] = None,
    chain_id: Optional[Union[str, int]] = None,
    config: Optional[VerificationConfig] = None,
    cancel_event: Optional[threading.Event] = None,
) -> Dict[str, ContractOutcome]:
    """
    Verify every contract of a hardhat-deploy network directory.

    Args:
        deployments_dir: hardhat-deploy ``deployments`` folder, or a network folder
        network: Network folder name inside deployments_dir (None if already a network folder)
        chain_id: Chain id (defaults to the .chainId file of the network folder)
        config: Batch configuration (defaults to VerificationConfig.from_env())
        cancel_event: Set it to stop polling and skip remaining contracts

    Returns:
        Deployment name -> outcome

    Raises:
        DeploymentsNotFoundError: If the network folder does not exist
        UnsupportedNetworkError: If the chain id is unknown or unsupported
    """
    network_dir = get_network_dir(deployments_dir, network)
    deployments = load_deployments(network_dir)

    if chain_id is None:
        chain_id = read_chain_id(network_dir)
    if chain_id is None:
        raise UnsupportedNetworkError(
            f"No .chainId file in {network_dir}; pass the chain id explicitly"
        )

    return submit_sources(
        deployments,
        chain_id,
        solc_inputs_path=get_solc_inputs_dir(network_dir),
        config=config,
        cancel_event=cancel_event,
    )
