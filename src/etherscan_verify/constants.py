"""Configuration constants for etherscan-verify library."""

# Explorer license-type codes keyed by SPDX id
# See https://etherscan.io/contract-license-types
LICENSE_TYPES = {
    "None": 1,
    "UNLICENSED": 2,
    "MIT": 3,
    "GPL-2.0": 4,
    "GPL-3.0": 5,
    "LGPL-2.1": 6,
    "LGPL-3.0": 7,
    "BSD-2-Clause": 8,
    "BSD-3-Clause": 9,
    "MPL-2.0": 10,
    "OSL-3.0": 11,
    "Apache-2.0": 12,
    "AGPL-3.0": 13,
}

LICENSE_TYPES_URL = "https://etherscan.io/contract-license-types"

# Explorer API hosts keyed by chain id (as reported by the node, decimal string)
EXPLORER_HOSTS = {
    "1": "http://api.etherscan.io",
    "3": "http://api-ropsten.etherscan.io",
    "4": "http://api-rinkeby.etherscan.io",
    "5": "http://api-goerli.etherscan.io",
    "42": "http://api-kovan.etherscan.io",
    "56": "https://api.bscscan.com",
    "97": "https://api-testnet.bscscan.com",
    "128": "https://api.hecoinfo.com",
    "256": "https://api-testnet.hecoinfo.com",
}

# Verification API
CODE_FORMAT = "solidity-standard-json-input"
PENDING_RESULT = "Pending in queue"
STATUS_OK = "1"
STATUS_NOTOK = "0"

# Polling and transport defaults
DEFAULT_POLL_INTERVAL = 10.0  # seconds
DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds

API_KEY_ENV = "ETHERSCAN_API_KEY"
