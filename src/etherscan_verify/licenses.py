"""SPDX license extraction and explorer license-type resolution."""

import re
from typing import List, Optional, Tuple

from .constants import LICENSE_TYPES, LICENSE_TYPES_URL
from .exceptions import LicenseMismatchError, MissingLicenseError, UnsupportedLicenseError

# A backslash also ends the identifier (escaped newline in JSON-embedded sources)
SPDX_PATTERN = re.compile(r"//\s*\t*SPDX-License-Identifier:\s*\t*(.*?)(?:[\s\\]|$)")


def extract_licenses(source: str) -> List[str]:
    """
    Find every SPDX license identifier declared in a source file.

    Args:
        source: Source file text

    Returns:
        Distinct identifiers in order of first appearance (empty if none)
    """
    licenses: List[str] = []
    for match in SPDX_PATTERN.finditer(source):
        license = match.group(1)
        if license not in licenses:
            licenses.append(license)
    return licenses


def extract_primary_license(source: str) -> Optional[str]:
    """
    Return the first SPDX identifier of a source file, or None.

    Several distinct identifiers in one file are not an error: the first wins.
    """
    licenses = extract_licenses(source)
    if not licenses:
        return None
    return licenses[0]


def license_type(license: str) -> Optional[int]:
    """Explorer license-type code for an SPDX id, or None if unsupported."""
    return LICENSE_TYPES.get(license)


def resolve_license(
    source_license: Optional[str],
    license_option: Optional[str] = None,
    force_license: bool = False,
) -> Tuple[str, int]:
    """
    Decide which license to submit and map it to the explorer's code.

    Args:
        source_license: License extracted from the contract source, if any
        license_option: License supplied by the caller (--license)
        force_license: Let license_option win over a different source license

    Returns:
        Tuple of (license, license_type_code)

    Raises:
        MissingLicenseError: If neither source nor caller provide a license
        LicenseMismatchError: If both are given, differ, and force_license is False
        UnsupportedLicenseError: If the effective license has no explorer code
    """
    if source_license is None:
        if not license_option:
            raise MissingLicenseError(
                "no license specified in the source code, please use option --license <SPDX>"
            )
        license = license_option
    elif license_option and license_option != source_license:
        if not force_license:
            raise LicenseMismatchError(
                f"mismatch for --license option ({license_option}) and the one specified "
                f"in the source code.\nLicenses found in source : {source_license}\n"
                "You can use option --force-license to force option --license"
            )
        license = license_option
    else:
        license = source_license

    code = license_type(license)
    if code is None:
        found_in = "found in source code " if license == source_license else ""
        raise UnsupportedLicenseError(
            f'license :"{license}" {found_in}is not supported by etherscan, list of supported '
            f"license can be found here : {LICENSE_TYPES_URL} . This tool expect the SPDX id, "
            'except for "None" and "UNLICENSED"'
        )

    return license, code
