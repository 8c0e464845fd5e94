"""Integration tests for the etherscan-verify command line."""

import logging
from pathlib import Path

import pytest
import responses

from etherscan_verify.cli import main, parse_args

API_URL = "http://api.etherscan.io/api"


@pytest.fixture(autouse=True)
def no_api_key_env(monkeypatch):
    monkeypatch.delenv("ETHERSCAN_API_KEY", raising=False)
    yield
    # main() attaches a handler to the captured stdout
    logging.getLogger("etherscan_verify").handlers.clear()


class TestParseArgs:
    def test_defaults(self):
        args = parse_args(["deployments/mainnet"])

        assert args.deployments_dir == "deployments/mainnet"
        assert args.poll_interval == 10.0
        assert args.max_attempts is None
        assert not args.solc_input
        assert not args.force_license

    def test_license_options(self):
        args = parse_args(["d", "--license", "MIT", "--force-license", "--solc-input"])

        assert args.license == "MIT"
        assert args.force_license
        assert args.solc_input


class TestMain:
    def test_missing_api_key(self, network_dir: Path):
        assert main([str(network_dir), "--no-color"]) == 2

    def test_missing_directory(self, tmp_path: Path):
        assert main([str(tmp_path / "nope"), "--api-key", "K", "--no-color"]) == 2

    def test_unsupported_chain(self, network_dir: Path):
        assert main([str(network_dir), "--api-key", "K", "--chain-id", "999", "--no-color"]) == 2

    @responses.activate
    def test_already_verified_exits_zero(self, network_dir: Path, monkeypatch):
        monkeypatch.setenv("ETHERSCAN_API_KEY", "ENVKEY")
        responses.add(responses.GET, API_URL, json={"status": "1", "result": '[{"type":"function"}]'})

        assert main([str(network_dir), "--no-color"]) == 0
        assert "apikey=ENVKEY" in responses.calls[0].request.url

    @responses.activate
    def test_failed_contract_exits_one(self, network_dir: Path, capsys):
        responses.add(
            responses.GET, API_URL, json={"status": "0", "result": "Contract source code not verified"}
        )
        responses.add(
            responses.POST, API_URL, json={"status": "0", "message": "NOTOK", "result": "Invalid API Key"}
        )

        code = main([str(network_dir), "--api-key", "K", "--poll-interval", "0", "--no-color"])

        assert code == 1
        assert "Token" in capsys.readouterr().out
