"""
outbox-execute - execute Arbitrum outgoing (L2-to-L1) messages on L1.

This package provides:
- bridge: ArbitrumBridge, a client for outgoing message lookup, state and execution
- actions: the find / wait-for-confirmation / execute steps
- cli: the ``outbox-execute`` command tying the steps together
"""

from outbox_execute._version import SDK_VERSION
from outbox_execute.actions import (
    FindMessageParams,
    WaitParams,
    execute_outgoing_message,
    find_outgoing_message,
    wait_for_confirmation,
)
from outbox_execute.bridge import ArbitrumBridge
from outbox_execute.config import BridgeConfig, get_config, get_network_addresses, load_contract_abis
from outbox_execute.types import MessageBatchProof, OutgoingMessage, OutgoingMessageState

__all__ = [
    "SDK_VERSION",
    "ArbitrumBridge",
    "BridgeConfig",
    "FindMessageParams",
    "MessageBatchProof",
    "OutgoingMessage",
    "OutgoingMessageState",
    "WaitParams",
    "execute_outgoing_message",
    "find_outgoing_message",
    "get_config",
    "get_network_addresses",
    "load_contract_abis",
    "wait_for_confirmation",
]
