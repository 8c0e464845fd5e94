"""Command-line entry point: etherscan-verify."""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .config import VerificationConfig
from .constants import API_KEY_ENV, DEFAULT_POLL_INTERVAL
from .exceptions import DeploymentsNotFoundError, UnsupportedNetworkError
from .logs import setup_logging
from .types import ContractOutcome
from .verifier import submit_sources_from_directory

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="etherscan-verify",
        description="Submit hardhat-deploy deployments to etherscan for source verification",
    )
    parser.add_argument(
        "deployments_dir",
        help="hardhat-deploy network folder (e.g. deployments/mainnet), or the deployments "
        "folder when --network is given",
    )
    parser.add_argument("--network", help="network folder inside deployments_dir")
    parser.add_argument("--chain-id", help="chain id (defaults to the .chainId file)")
    parser.add_argument("--api-key", help=f"etherscan API key (defaults to ${API_KEY_ENV})")
    parser.add_argument("--license", help="SPDX license id to use when the source has none")
    parser.add_argument(
        "--force-license",
        action="store_true",
        help="use --license even if the source declares a different license",
    )
    parser.add_argument(
        "--solc-input",
        action="store_true",
        help="fall back on the full solc input if verification with metadata sources fails",
    )
    parser.add_argument(
        "--poll-interval",
        type=float,
        default=DEFAULT_POLL_INTERVAL,
        help="seconds between status checks (default: %(default)s)",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="give up polling a job after this many status checks (default: never)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run a verification batch.

    Returns:
        0 if every contract is verified, 1 if some failed, 2 if the batch could not run
    """
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), color=not args.no_color)

    config = VerificationConfig.from_env(
        api_key=args.api_key,
        license=args.license,
        force_license=args.force_license,
        fallback_on_solc_input=args.solc_input,
        poll_interval=args.poll_interval,
        max_poll_attempts=args.max_attempts,
    )
    if not config.api_key:
        logger.error("etherscan API key required: pass --api-key or set $%s", API_KEY_ENV)
        return 2

    try:
        outcomes = submit_sources_from_directory(
            args.deployments_dir,
            network=args.network,
            chain_id=args.chain_id,
            config=config,
        )
    except (DeploymentsNotFoundError, UnsupportedNetworkError) as e:
        logger.error("%s", e)
        return 2

    failed = [
        name
        for name, outcome in outcomes.items()
        if outcome in (ContractOutcome.FAILED, ContractOutcome.REJECTED)
    ]
    if failed:
        logger.error("%d contract(s) not verified: %s", len(failed), ", ".join(failed))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
