"""Data types and dataclasses for etherscan-verify library."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .constants import CODE_FORMAT
from .exceptions import AmbiguousCompilationTargetError


class JobResult(Enum):
    """State of an explorer verification job as seen by the poller."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"
    TIMED_OUT = "timed-out"
    CANCELLED = "cancelled"


class ContractOutcome(Enum):
    """Final outcome of one contract in a batch."""

    VERIFIED = "verified"
    ALREADY_VERIFIED = "already-verified"
    REJECTED = "rejected"  # failed locally or at submission, never polled to success
    FAILED = "failed"


@dataclass
class DeploymentRecord:
    """A hardhat-deploy deployment record (read-only here)."""

    # Required fields
    name: str  # Deployment name, e.g. "Token"
    address: str
    abi: List[Dict[str, Any]]

    # Optional fields
    metadata: Optional[str] = None  # Raw compiler metadata JSON string
    args: Optional[List[Any]] = None  # Constructor arguments
    libraries: Optional[Dict[str, str]] = None  # Library name -> address
    solc_input_hash: Optional[str] = None


@dataclass
class ContractMetadata:
    """Compiler metadata of a single contract."""

    language: str
    compiler_version: str
    settings: Dict[str, Any]
    sources: Dict[str, str]  # Source path -> content

    @property
    def compilation_target(self) -> Tuple[str, str]:
        """
        Resolve the single (filepath, contract name) the metadata was compiled for.

        Raises:
            AmbiguousCompilationTargetError: If the target is missing or not unique
        """
        target = self.settings.get("compilationTarget")
        if not isinstance(target, dict) or len(target) != 1:
            raise AmbiguousCompilationTargetError(
                "Failed to extract contract fully qualified name from "
                "metadata.settings.compilationTarget"
            )
        filepath, contract_name = next(iter(target.items()))
        if not filepath or not contract_name:
            raise AmbiguousCompilationTargetError(
                f"Incomplete compilationTarget entry: {filepath!r} -> {contract_name!r}"
            )
        return filepath, contract_name


@dataclass
class CompilerInput:
    """Standard JSON compiler input submitted to the explorer."""

    language: str
    settings: Dict[str, Any]
    sources: Dict[str, Dict[str, str]]  # Source path -> {"content": ...}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.language,
            "settings": self.settings,
            "sources": self.sources,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


@dataclass
class VerificationRequest:
    """Everything needed to submit one contract, built before any POST."""

    name: str
    address: str
    contract_name_path: str  # "<filepath>:<contract name>"
    compiler_version: str
    license: str
    license_type: int
    compiler_input: CompilerInput
    constructor_arguments: Optional[str] = None  # Hex without 0x prefix
    use_solc_input: bool = False

    def to_form(self, api_key: Optional[str]) -> Dict[str, Any]:
        """Form fields of the verifysourcecode call."""
        return {
            "apikey": api_key,
            "module": "contract",
            "action": "verifysourcecode",
            "contractaddress": self.address,
            "sourceCode": self.compiler_input.to_json(),
            "codeformat": CODE_FORMAT,
            "contractname": self.contract_name_path,
            # See https://etherscan.io/solcversions for supported versions
            "compilerversion": f"v{self.compiler_version}",
            # Misspelling is part of the explorer API
            "constructorArguements": self.constructor_arguments,
            "licenseType": self.license_type,
        }

    def redacted(self) -> Dict[str, Any]:
        """Form fields safe to print: API key masked and sources elided."""
        form = self.to_form("XXXXXX")
        form["sourceCode"] = "..."
        return form


@dataclass
class VerificationJob:
    """A submitted verification job."""

    guid: str
    contract_name_path: str
    result: JobResult = JobResult.PENDING
    message: Optional[str] = None
    attempts: int = 0
