"""HTTP client for Etherscan-family contract verification APIs."""

import json
import logging
from typing import Any, Dict, List, Optional, Union

import requests

from .constants import DEFAULT_REQUEST_TIMEOUT, EXPLORER_HOSTS, STATUS_NOTOK, STATUS_OK
from .exceptions import ExplorerConnectionError, SubmissionRejectedError, UnsupportedNetworkError

logger = logging.getLogger(__name__)


def resolve_host(chain_id: Union[str, int]) -> str:
    """
    Get the explorer API host for a chain.

    Args:
        chain_id: Chain id, e.g. "1" or 1

    Returns:
        Host URL without trailing slash, e.g. "http://api.etherscan.io"

    Raises:
        UnsupportedNetworkError: If no explorer is known for the chain
    """
    host = EXPLORER_HOSTS.get(str(chain_id).strip())
    if host is None:
        raise UnsupportedNetworkError(f"Network with chainId: {chain_id} not supported")
    return host


class ExplorerClient:
    """Thin wrapper around the explorer's /api endpoint."""

    def __init__(
        self,
        host: str,
        api_key: Optional[str],
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            host: Explorer API host, see resolve_host()
            api_key: Explorer API key
            timeout: Per-request timeout in seconds
            session: Optional requests session to reuse
        """
        self.host = host.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._session = session or requests.Session()

    @property
    def api_url(self) -> str:
        return f"{self.host}/api"

    def _request(self, method: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            response = self._session.request(method, self.api_url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise ExplorerConnectionError(f"Network error calling {self.api_url}: {e}") from e
        except ValueError as e:
            raise ExplorerConnectionError(f"Non-JSON response from {self.api_url}: {e}") from e

        if not isinstance(data, dict):
            raise ExplorerConnectionError(f"Unexpected response from {self.api_url}: {data!r}")
        return data

    def get_abi(self, address: str) -> Optional[List[Any]]:
        """
        Fetch the verified ABI of a contract.

        Args:
            address: Contract address

        Returns:
            The ABI if the contract is already verified, None otherwise

        Raises:
            SubmissionRejectedError: If the explorer reports success with a malformed ABI
            ExplorerConnectionError: On transport errors
        """
        data = self._request(
            "GET",
            params={
                "module": "contract",
                "action": "getabi",
                "address": address,
                "apikey": self.api_key,
            },
        )
        if data.get("status") == STATUS_NOTOK:
            return None

        try:
            abi = json.loads(data.get("result"))
        except (TypeError, json.JSONDecodeError) as e:
            raise SubmissionRejectedError(
                f"Malformed ABI returned by explorer for {address}: {data.get('result')!r}"
            ) from e

        return abi or None

    def is_verified(self, address: str) -> bool:
        """Check whether the explorer already has verified source for an address."""
        return self.get_abi(address) is not None

    def submit(self, form: Dict[str, Any]) -> str:
        """
        POST a verifysourcecode request.

        Args:
            form: Form fields, see VerificationRequest.to_form(); None values are omitted

        Returns:
            The verification job guid

        Raises:
            SubmissionRejectedError: If the explorer refuses the submission or returns no guid
            ExplorerConnectionError: On transport errors
        """
        data = self._request("POST", data={k: v for k, v in form.items() if v is not None})

        if data.get("status") != STATUS_OK:
            logger.debug("Rejected submission response: %s", data)
            raise SubmissionRejectedError(
                f'failed to submit : "{data.get("message")}" ({data.get("result")})'
            )

        guid = data.get("result")
        if not guid:
            raise SubmissionRejectedError("submission failed to return a guid")
        return guid

    def check_status(self, guid: str) -> Dict[str, Any]:
        """
        Query a verification job.

        Args:
            guid: Job guid returned by submit()

        Returns:
            Raw response with status, message and result fields
        """
        return self._request(
            "GET",
            params={
                "apikey": self.api_key,
                "guid": guid,
                "module": "contract",
                "action": "checkverifystatus",
            },
        )
