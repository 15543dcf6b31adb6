ARB_SYS_ADDRESS = "0x0000000000000000000000000000000000000064"
NODE_INTERFACE_ADDRESS = "0x00000000000000000000000000000000000000C8"

ARBITRUM_ONE_CHAIN_ID = 42161
ARBITRUM_RINKEBY_CHAIN_ID = 421611

DEFAULT_L2_RPC_URL = "https://arb1.arbitrum.io/rpc"
DEFAULT_L1_RPC_TEMPLATE = "https://mainnet.infura.io/v3/{infura_key}"

DEFAULT_POLL_INTERVAL_SECONDS = 60
PROOF_RETRY_DELAY_SECONDS = 10
PROOF_MAX_ATTEMPTS = 30
