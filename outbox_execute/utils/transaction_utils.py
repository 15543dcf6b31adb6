"""Transaction utility functions for the bridge client."""

from typing import Any

from eth_account.signers.local import LocalAccount
from hexbytes import HexBytes
from web3 import Web3


def sign_and_send_transaction(w3: Web3, account: LocalAccount, contract_function: Any) -> HexBytes:
    """Build, sign and broadcast a contract call from the given account.

    Args:
        w3: Web3 instance of the chain the contract lives on
        account: Local account used as sender and signer
        contract_function: Bound contract function, e.g. ``outbox.functions.executeTransaction(...)``

    Returns:
        HexBytes: Hash of the submitted transaction
    """
    # Build the transaction
    tx = contract_function.build_transaction(
        {
            "from": account.address,
            "nonce": w3.eth.get_transaction_count(account.address),
            "chainId": w3.eth.chain_id,
        }
    )

    # Sign the transaction
    signed_tx = w3.eth.account.sign_transaction(tx, private_key=account.key)

    # Send the raw transaction
    return w3.eth.send_raw_transaction(signed_tx.raw_transaction)
