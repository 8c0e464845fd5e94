"""Custom exception classes for etherscan-verify library."""


class VerificationError(Exception):
    """Base exception for contract verification errors."""

    pass


class UnsupportedNetworkError(VerificationError, ValueError):
    """Raised when no explorer host is known for a chain id (aborts the batch)."""

    pass


class DeploymentsNotFoundError(VerificationError, FileNotFoundError):
    """Raised when the deployments directory does not exist."""

    pass


class DefectiveDeploymentError(VerificationError, ValueError):
    """Raised when a deployment file is missing its address or ABI."""

    pass


class MissingMetadataError(VerificationError, ValueError):
    """Raised when a contract was deployed without saving compiler metadata."""

    pass


class MetadataDecodeError(VerificationError, ValueError):
    """Raised when compiler metadata is not valid JSON or lacks required fields."""

    pass


class AmbiguousCompilationTargetError(VerificationError, ValueError):
    """Raised when metadata.settings.compilationTarget is missing or has several entries."""

    pass


class MissingLicenseError(VerificationError, ValueError):
    """Raised when neither the source nor the caller provides a license."""

    pass


class LicenseMismatchError(VerificationError, ValueError):
    """Raised when the caller's license differs from the one found in the source."""

    pass


class UnsupportedLicenseError(VerificationError, ValueError):
    """Raised when a license has no explorer license-type code."""

    pass


class MissingSolcInputError(VerificationError, FileNotFoundError):
    """Raised when the persisted full compiler input cannot be read."""

    pass


class ArgumentEncodingError(VerificationError, ValueError):
    """Raised when constructor arguments do not match the constructor ABI."""

    pass


class SubmissionRejectedError(VerificationError, RuntimeError):
    """Raised when the explorer rejects a submission or returns a malformed ABI."""

    pass


class VerificationFailedError(VerificationError, RuntimeError):
    """Raised when a verification job ends in a non-success state."""

    pass


class ExplorerConnectionError(VerificationError, RuntimeError):
    """Raised when the explorer cannot be reached or answers with non-JSON."""

    pass
