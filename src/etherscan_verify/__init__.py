"""
etherscan-verify: submit hardhat-deploy deployments to Etherscan-family explorers for verification
"""

from importlib.metadata import PackageNotFoundError, version

from .config import VerificationConfig
from .exceptions import (
    AmbiguousCompilationTargetError,
    ArgumentEncodingError,
    DefectiveDeploymentError,
    DeploymentsNotFoundError,
    ExplorerConnectionError,
    LicenseMismatchError,
    MetadataDecodeError,
    MissingLicenseError,
    MissingMetadataError,
    MissingSolcInputError,
    SubmissionRejectedError,
    UnsupportedLicenseError,
    UnsupportedNetworkError,
    VerificationError,
    VerificationFailedError,
)
from .explorer import ExplorerClient, resolve_host
from .types import ContractOutcome, DeploymentRecord, JobResult
from .verifier import prepare_request, submit_sources, submit_sources_from_directory, verify_contract

try:
    __version__ = version("etherscan-verify")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "submit_sources",
    "submit_sources_from_directory",
    "verify_contract",
    "prepare_request",
    "ExplorerClient",
    "resolve_host",
    "VerificationConfig",
    "DeploymentRecord",
    "ContractOutcome",
    "JobResult",
    "VerificationError",
    "UnsupportedNetworkError",
    "DeploymentsNotFoundError",
    "DefectiveDeploymentError",
    "MissingMetadataError",
    "MetadataDecodeError",
    "AmbiguousCompilationTargetError",
    "MissingLicenseError",
    "LicenseMismatchError",
    "UnsupportedLicenseError",
    "MissingSolcInputError",
    "ArgumentEncodingError",
    "SubmissionRejectedError",
    "VerificationFailedError",
    "ExplorerConnectionError",
]
