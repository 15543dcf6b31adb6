from dataclasses import replace
from types import SimpleNamespace

import pytest

from outbox_execute.cli import main
from outbox_execute.exceptions import ConfigurationError
from outbox_execute.types import OutgoingMessageState
from tests.helpers import FakeBridge

TX_HASH = "0x688d4ead30173aac1191b7b39c25e341e685cdc1f178398f7c955041b183cba0"


@pytest.fixture
def use_bridge(monkeypatch):
    """Make the CLI run against the given bridge; records poll intervals passed to get_config."""
    requested: list = []

    def install(bridge):
        def fake_get_config(poll_interval=None):
            requested.append(poll_interval)
            return {
                "config": SimpleNamespace(poll_interval=poll_interval if poll_interval is not None else 60),
                "bridge": bridge,
                "l1_account": SimpleNamespace(address="0x3333333333333333333333333333333333333333"),
            }

        monkeypatch.setattr("outbox_execute.cli.get_config", fake_get_config)
        return requested

    return install


def test_executes_after_confirmation(fake_bridge, use_bridge, sleeps):
    fake_bridge.states = [OutgoingMessageState.UNCONFIRMED, OutgoingMessageState.CONFIRMED]
    use_bridge(fake_bridge)

    assert main([TX_HASH]) == 0

    assert fake_bridge.call_names() == [
        "get_transaction_receipt",
        "get_withdrawals_in_l2_transaction",
        "get_outgoing_message_state",
        "get_outgoing_message_state",
        "trigger_l2_to_l1_transaction",
        "wait_for_receipt",
    ]
    assert sleeps == [60]


def test_no_outgoing_messages_exits_without_polling(use_bridge, sleeps):
    bridge = FakeBridge(receipt={"logs": []}, messages=[])
    use_bridge(bridge)

    assert main([TX_HASH]) == 1
    assert "get_outgoing_message_state" not in bridge.call_names()


def test_unknown_transaction(use_bridge):
    bridge = FakeBridge(receipt=None)
    use_bridge(bridge)

    assert main([TX_HASH]) == 1
    assert bridge.call_names() == ["get_transaction_receipt"]


@pytest.mark.parametrize("state", [OutgoingMessageState.EXECUTED, OutgoingMessageState.NOT_FOUND])
def test_terminal_state_never_executes(fake_bridge, use_bridge, sleeps, state):
    fake_bridge.states = [state]
    use_bridge(fake_bridge)

    assert main([TX_HASH]) == 1
    assert "trigger_l2_to_l1_transaction" not in fake_bridge.call_names()


@pytest.mark.parametrize("tx_hash", [TX_HASH[2:], TX_HASH[:34], "0xnothex"])
def test_malformed_hash_fails_before_network(monkeypatch, tx_hash):
    def fail_get_config(poll_interval=None):
        raise AssertionError("get_config must not be called")

    monkeypatch.setattr("outbox_execute.cli.get_config", fail_get_config)

    assert main([tx_hash]) == 1


def test_reverted_execution_exits_1(use_bridge, sleeps, message):
    bridge = FakeBridge(
        receipt={"logs": []},
        messages=[message],
        states=[OutgoingMessageState.CONFIRMED],
        execution_status=0,
    )
    use_bridge(bridge)

    assert main([TX_HASH]) == 1


def test_configuration_error_exits_1(monkeypatch):
    def broken_get_config(poll_interval=None):
        raise ConfigurationError("No INFURA_KEY set.")

    monkeypatch.setattr("outbox_execute.cli.get_config", broken_get_config)

    assert main([TX_HASH]) == 1


def test_unexpected_error_exits_1(fake_bridge, use_bridge):
    def boom(tx_hash):
        raise RuntimeError("rpc exploded")

    fake_bridge.get_transaction_receipt = boom
    use_bridge(fake_bridge)

    assert main([TX_HASH]) == 1


def test_options_are_forwarded(use_bridge, sleeps, message):
    second = replace(message, index_in_batch=message.index_in_batch + 1)
    bridge = FakeBridge(
        receipt={"logs": []},
        messages=[message, second],
        states=[OutgoingMessageState.UNCONFIRMED, OutgoingMessageState.CONFIRMED],
    )
    requested = use_bridge(bridge)

    assert main([TX_HASH, "--message-index", "1", "--poll-interval", "2.5"]) == 0

    assert requested == [2.5]
    assert sleeps == [2.5]
    assert ("trigger_l2_to_l1_transaction", second.batch_number, second.index_in_batch) in bridge.calls
