"""Unit tests for verification status polling."""

import threading

import responses

from etherscan_verify.explorer import ExplorerClient
from etherscan_verify.polling import poll_verification_status
from etherscan_verify.types import JobResult, VerificationJob

API_URL = "http://api.etherscan.io/api"

PENDING = {"status": "0", "message": "NOTOK", "result": "Pending in queue"}
PASSED = {"status": "1", "message": "OK", "result": "Pass - Verified"}
FAILED = {"status": "0", "message": "NOTOK", "result": "Fail - Unable to verify"}


def new_job() -> VerificationJob:
    return VerificationJob(guid="abc123", contract_name_path="src/Token.sol:Token")


class TestPollVerificationStatus:
    """Test the poll_verification_status function."""

    @responses.activate
    def test_success_after_pending(self, client: ExplorerClient):
        """Test that pending results keep polling until status 1."""
        responses.add(responses.GET, API_URL, json=PENDING)
        responses.add(responses.GET, API_URL, json=PENDING)
        responses.add(responses.GET, API_URL, json=PASSED)

        job = poll_verification_status(client, new_job(), interval=0)

        assert job.result == JobResult.SUCCESS
        assert job.attempts == 3
        assert len(responses.calls) == 3

    @responses.activate
    def test_failure_is_terminal(self, client: ExplorerClient):
        responses.add(responses.GET, API_URL, json=FAILED)
        responses.add(responses.GET, API_URL, json=PASSED)

        job = poll_verification_status(client, new_job(), interval=0)

        assert job.result == JobResult.FAILURE
        assert "Fail - Unable to verify" in job.message
        assert "NOTOK" in job.message
        assert len(responses.calls) == 1

    @responses.activate
    def test_other_pending_wording_is_failure(self, client: ExplorerClient):
        """Test that only the exact pending text keeps polling."""
        responses.add(responses.GET, API_URL, json={"status": "0", "result": "pending in queue"})

        job = poll_verification_status(client, new_job(), interval=0)

        assert job.result == JobResult.FAILURE

    @responses.activate
    def test_times_out_after_max_attempts(self, client: ExplorerClient):
        for _ in range(5):
            responses.add(responses.GET, API_URL, json=PENDING)

        job = poll_verification_status(client, new_job(), interval=0, max_attempts=3)

        assert job.result == JobResult.TIMED_OUT
        assert job.attempts == 3
        assert len(responses.calls) == 3

    @responses.activate
    def test_cancelled_before_first_query(self, client: ExplorerClient):
        cancel = threading.Event()
        cancel.set()

        job = poll_verification_status(client, new_job(), interval=0, cancel_event=cancel)

        assert job.result == JobResult.CANCELLED
        assert len(responses.calls) == 0

    @responses.activate
    def test_cancel_event_not_set_keeps_polling(self, client: ExplorerClient):
        responses.add(responses.GET, API_URL, json=PENDING)
        responses.add(responses.GET, API_URL, json=PASSED)

        job = poll_verification_status(
            client, new_job(), interval=0, cancel_event=threading.Event()
        )

        assert job.result == JobResult.SUCCESS

    @responses.activate
    def test_waits_before_each_query(self, client: ExplorerClient, monkeypatch):
        """Test that the interval is slept before every status query."""
        sleeps = []
        monkeypatch.setattr("etherscan_verify.polling.time.sleep", sleeps.append)
        responses.add(responses.GET, API_URL, json=PENDING)
        responses.add(responses.GET, API_URL, json=PASSED)

        poll_verification_status(client, new_job())

        assert sleeps == [10.0, 10.0]
