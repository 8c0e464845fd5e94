"""Path management utilities for hardhat-deploy deployment directories."""

from pathlib import Path
from typing import Optional, Union


def get_network_dir(deployments_root: Union[Path, str], network: Optional[str] = None) -> Path:
    """
    Get the directory holding one network's deployment records.

    Args:
        deployments_root: Either the hardhat-deploy ``deployments`` folder or
                          a network folder inside it
        network: Network name; if None, deployments_root is the network folder

    Returns:
        Absolute path to the network directory
    """
    root = Path(deployments_root).absolute()
    if network is None:
        return root
    return root / network


def get_solc_inputs_dir(network_dir: Union[Path, str]) -> Path:
    """
    Get the directory where hardhat-deploy persists full compiler inputs.

    Args:
        network_dir: Network deployment directory

    Returns:
        Path to {network_dir}/solcInputs
    """
    return Path(network_dir) / "solcInputs"


def get_solc_input_path(solc_inputs_dir: Union[Path, str], solc_input_hash: str) -> Path:
    """Path to the persisted compiler input for a content hash."""
    return Path(solc_inputs_dir) / f"{solc_input_hash}.json"


def get_chain_id_path(network_dir: Union[Path, str]) -> Path:
    """Path to the .chainId file written by hardhat-deploy."""
    return Path(network_dir) / ".chainId"
