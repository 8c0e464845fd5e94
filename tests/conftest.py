"""Shared pytest fixtures for etherscan-verify tests."""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest

from etherscan_verify.config import VerificationConfig
from etherscan_verify.explorer import ExplorerClient
from etherscan_verify.parsers import parse_deployment_record
from etherscan_verify.types import DeploymentRecord

MAINNET_HOST = "http://api.etherscan.io"
TOKEN_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"

TOKEN_SOURCE = (
    "// SPDX-License-Identifier: MIT\n"
    "pragma solidity 0.8.9;\n"
    "\n"
    "contract Token {}\n"
)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def network_dir(fixtures_dir: Path) -> Path:
    """Return the sample hardhat-deploy network folder (chain id 1)."""
    return fixtures_dir / "deployments" / "mainnet"


@pytest.fixture
def solc_inputs_dir(network_dir: Path) -> Path:
    """Return the sample solcInputs folder."""
    return network_dir / "solcInputs"


@pytest.fixture
def token_record(network_dir: Path) -> DeploymentRecord:
    """Return the sample Token deployment record."""
    return parse_deployment_record(network_dir / "Token.json")


@pytest.fixture
def make_metadata() -> Callable[..., str]:
    """Factory for compiler metadata JSON strings."""

    def _make(
        source: str = TOKEN_SOURCE,
        target: Optional[Dict[str, str]] = None,
        extra_sources: Optional[Dict[str, str]] = None,
        settings: Optional[Dict[str, Any]] = None,
    ) -> str:
        sources = {"src/Token.sol": {"content": source, "keccak256": "0x01", "urls": ["bzz-raw://01"]}}
        for path, content in (extra_sources or {}).items():
            sources[path] = {"content": content, "keccak256": "0x02"}

        all_settings: Dict[str, Any] = {
            "compilationTarget": {"src/Token.sol": "Token"} if target is None else target,
            "optimizer": {"enabled": True, "runs": 200},
            "evmVersion": "london",
        }
        all_settings.update(settings or {})

        return json.dumps(
            {
                "compiler": {"version": "0.8.9+commit.e5eed63a"},
                "language": "Solidity",
                "settings": all_settings,
                "sources": sources,
                "version": 1,
            }
        )

    return _make


@pytest.fixture
def make_record(make_metadata: Callable[..., str]) -> Callable[..., DeploymentRecord]:
    """Factory for deployment records with a constructor-less ABI."""

    def _make(name: str = "Token", **fields: Any) -> DeploymentRecord:
        values: Dict[str, Any] = {
            "address": TOKEN_ADDRESS,
            "abi": [],
            "metadata": make_metadata(),
        }
        values.update(fields)
        return DeploymentRecord(name=name, **values)

    return _make


@pytest.fixture
def config() -> VerificationConfig:
    """Configuration that polls without waiting."""
    return VerificationConfig(api_key="TESTKEY", poll_interval=0)


@pytest.fixture
def client() -> ExplorerClient:
    """Explorer client for the mainnet host."""
    return ExplorerClient(MAINNET_HOST, "TESTKEY")
