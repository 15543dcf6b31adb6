from unittest.mock import MagicMock

from eth_account import Account
from hexbytes import HexBytes

from outbox_execute.utils.transaction_utils import sign_and_send_transaction

PRIVATE_KEY = "0x" + "01" * 32
OUTBOX = "0x760723CD2e632826c38Fef8CD438A4CC7E7E1A40"


def test_sign_and_send_transaction_broadcasts_signed_bytes():
    account = Account.from_key(PRIVATE_KEY)
    w3 = MagicMock()
    w3.eth.account = Account()
    w3.eth.get_transaction_count.return_value = 3
    w3.eth.chain_id = 1
    tx_hash = HexBytes("0x" + "ab" * 32)
    w3.eth.send_raw_transaction.return_value = tx_hash

    tx = {
        "from": account.address,
        "to": OUTBOX,
        "value": 0,
        "gas": 600_000,
        "gasPrice": 10**9,
        "nonce": 3,
        "chainId": 1,
        "data": "0x",
    }
    contract_function = MagicMock()
    contract_function.build_transaction.return_value = tx

    assert sign_and_send_transaction(w3, account, contract_function) == tx_hash

    contract_function.build_transaction.assert_called_once_with(
        {"from": account.address, "nonce": 3, "chainId": 1}
    )
    w3.eth.get_transaction_count.assert_called_once_with(account.address)

    expected_raw = account.sign_transaction(tx).raw_transaction
    w3.eth.send_raw_transaction.assert_called_once_with(expected_raw)
