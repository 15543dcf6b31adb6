"""
Execute Outbox Message - Wait for an Arbitrum L2-to-L1 message and execute it on L1.

Given the hash of an L2 transaction that sent an outgoing message (e.g. via
ArbSys.sendTxToL1), this looks up the message, polls its state until the
dispute period is over and the message is confirmed, then executes it in
its L1 outbox entry.

Requirements:
- INFURA_KEY: Node provider key (builds the default L1 endpoint)
- DEVNET_PRIVKEY: Private key of the wallet used on L1 and L2
- L1RPC / L2RPC: Optional endpoint overrides

Usage:
    outbox-execute 0x688d4ead30173aac1191b7b39c25e341e685cdc1f178398f7c955041b183cba0
    python -m outbox_execute <tx_hash> --poll-interval 30
"""

from typing import Optional, Sequence

import argparse
import logging

from outbox_execute._version import SDK_VERSION
from outbox_execute.actions import (
    FindMessageParams,
    WaitParams,
    execute_outgoing_message,
    find_outgoing_message,
    wait_for_confirmation,
)
from outbox_execute.config import get_config
from outbox_execute.exceptions import OutboxExecuteError
from outbox_execute.utils.tx_hash import validate_transaction_hash

logger = logging.getLogger("outbox_execute.cli")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="outbox-execute",
        description="Wait for an Arbitrum outgoing message to be confirmed, then execute it on L1",
    )
    parser.add_argument("tx_hash", help="Hash of the L2 transaction that sent the L2 to L1 message")
    parser.add_argument(
        "--message-index",
        type=int,
        default=0,
        help="Which outgoing message of the transaction to execute (default: first)",
    )
    parser.add_argument(
        "--poll-interval",
        type=float,
        default=None,
        help="Seconds between state queries (default: POLL_INTERVAL_SECONDS or 60)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {SDK_VERSION}")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the wait-and-execute flow. Returns the process exit code."""
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        # Fail fast on a malformed hash, before any provider is created
        tx_hash = validate_transaction_hash(args.tx_hash)

        # Load configuration and the bridge client
        config = get_config(poll_interval=args.poll_interval)
        bridge = config["bridge"]
        logger.info(f"Using wallet {config['l1_account'].address}")

        message = find_outgoing_message(bridge, FindMessageParams(tx_hash=tx_hash, message_index=args.message_index))

        wait_for_confirmation(bridge, message, WaitParams(poll_interval=config["config"].poll_interval))

        execute_outgoing_message(bridge, message)
    except OutboxExecuteError as e:
        logger.error(str(e))
        return 1
    except Exception:
        logger.exception("Unexpected error while executing the outgoing message")
        return 1

    return 0
