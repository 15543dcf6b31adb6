"""Gathering configuration from environment variables and ABIs"""

from typing import Optional

import json
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv
from web3 import Web3

from outbox_execute.bridge import ArbitrumBridge
from outbox_execute.consts import (
    ARBITRUM_ONE_CHAIN_ID,
    ARBITRUM_RINKEBY_CHAIN_ID,
    DEFAULT_L1_RPC_TEMPLATE,
    DEFAULT_L2_RPC_URL,
    DEFAULT_POLL_INTERVAL_SECONDS,
)
from outbox_execute.exceptions import ConfigurationError, InvalidChainIdError


def get_network_addresses(l2_chain_id: int) -> dict:
    """Get network-specific contract addresses. Outboxes are listed oldest first."""
    if l2_chain_id == ARBITRUM_ONE_CHAIN_ID:
        return {
            "outbox_addresses": [
                "0x667e23ABd27E623c11d4CC00ca3EC4d0bD63337a",
                "0x760723CD2e632826c38Fef8CD438A4CC7E7E1A40",
            ],
        }
    elif l2_chain_id == ARBITRUM_RINKEBY_CHAIN_ID:
        return {
            "outbox_addresses": [
                "0xefa1a42D3c4699822eE42677515A64b658be1bFc",
                "0x2360A33905dc1c72b12d975d975F42BaBdcef9F3",
            ],
        }
    else:
        raise InvalidChainIdError(
            f"Invalid L2 chain id {l2_chain_id}! It's neither 42161 (Arbitrum One) nor 421611 (Arbitrum Rinkeby). "
            "Set OUTBOX_ADDRESSES to use another network."
        )


def load_contract_abis() -> dict:
    """Load all contract ABIs from files."""
    abis_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "abis")

    abis = {}

    with open(os.path.join(abis_dir, "ArbSys.json"), encoding="utf-8") as f:
        abis["arb_sys_abi"] = json.load(f)

    with open(os.path.join(abis_dir, "NodeInterface.json"), encoding="utf-8") as f:
        abis["node_interface_abi"] = json.load(f)

    with open(os.path.join(abis_dir, "Outbox.json"), encoding="utf-8") as f:
        abis["outbox_abi"] = json.load(f)

    with open(os.path.join(abis_dir, "OutboxEntry.json"), encoding="utf-8") as f:
        abis["outbox_entry_abi"] = json.load(f)

    return abis


@dataclass
class BridgeConfig:
    """Configuration for executing outgoing messages"""

    infura_key: str
    private_key: str
    l1_rpc_url: str
    l2_rpc_url: str
    l2_chain_id: int = ARBITRUM_ONE_CHAIN_ID
    outbox_addresses: list[str] = field(default_factory=list)
    poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS

    @classmethod
    def from_env(cls, poll_interval: Optional[float] = None) -> "BridgeConfig":
        """Create a config instance from environment variables."""
        load_dotenv()

        infura_key = os.environ.get("INFURA_KEY")
        if not infura_key:
            raise ConfigurationError("No INFURA_KEY set.")

        private_key = os.environ.get("DEVNET_PRIVKEY")
        if not private_key:
            raise ConfigurationError("No DEVNET_PRIVKEY set.")

        try:
            l2_chain_id = int(os.environ.get("L2_CHAIN_ID", ARBITRUM_ONE_CHAIN_ID))
        except ValueError as e:
            raise ConfigurationError(f"L2_CHAIN_ID must be an integer: {e}") from e

        # An explicit outbox list takes precedence over the built-in addresses
        outboxes_env = os.environ.get("OUTBOX_ADDRESSES", "")
        outbox_addresses = [address.strip() for address in outboxes_env.split(",") if address.strip()]
        if not outbox_addresses:
            outbox_addresses = get_network_addresses(l2_chain_id)["outbox_addresses"]

        if poll_interval is None:
            try:
                poll_interval = float(os.environ.get("POLL_INTERVAL_SECONDS", DEFAULT_POLL_INTERVAL_SECONDS))
            except ValueError as e:
                raise ConfigurationError(f"POLL_INTERVAL_SECONDS must be a number: {e}") from e
        if poll_interval <= 0:
            raise ConfigurationError("Poll interval must be positive")

        return cls(
            infura_key=infura_key,
            private_key=private_key,
            l1_rpc_url=os.environ.get("L1RPC") or DEFAULT_L1_RPC_TEMPLATE.format(infura_key=infura_key),
            l2_rpc_url=os.environ.get("L2RPC") or DEFAULT_L2_RPC_URL,
            l2_chain_id=l2_chain_id,
            outbox_addresses=outbox_addresses,
            poll_interval=poll_interval,
        )


def get_config(poll_interval: Optional[float] = None) -> dict:
    """Get complete configuration: providers, wallets and the bridge client."""
    bridge_config = BridgeConfig.from_env(poll_interval=poll_interval)

    abis = load_contract_abis()

    l1_w3 = Web3(Web3.HTTPProvider(bridge_config.l1_rpc_url))
    l2_w3 = Web3(Web3.HTTPProvider(bridge_config.l2_rpc_url))

    try:
        l1_account = l1_w3.eth.account.from_key(bridge_config.private_key)
        l2_account = l2_w3.eth.account.from_key(bridge_config.private_key)
    except Exception as e:
        raise ConfigurationError(f"DEVNET_PRIVKEY is not a valid private key: {e}") from e

    l1_w3.eth.default_account = l1_account.address
    l2_w3.eth.default_account = l2_account.address

    bridge = ArbitrumBridge(
        l1_w3=l1_w3,
        l2_w3=l2_w3,
        l1_account=l1_account,
        outbox_addresses=bridge_config.outbox_addresses,
        abis=abis,
    )

    return {
        "config": bridge_config,
        "l1_w3": l1_w3,
        "l2_w3": l2_w3,
        "l1_account": l1_account,
        "l2_account": l2_account,
        "bridge": bridge,
    }
