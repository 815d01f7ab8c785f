"""Fixed addresses, endpoints and prices for the Silicon.net TVL adapter."""

from types import MappingProxyType
from typing import Mapping

# Arbitrum deployment; zero addresses until the contracts are live
POOL_TOKEN = "0x0000000000000000000000000000000000000000"
# Pool token pricing source (getPoolTokensForDeposit). Not read yet: GPU value
# is reported in USD rather than converted into pool tokens.
ORACLE = "0x0000000000000000000000000000000000000000"

CHAIN = "arbitrum"
DEFAULT_ARBITRUM_RPC_URL = "https://arb1.arbitrum.io/rpc"

# GPU valuation prices in USD. Keys are matched as substrings in this order,
# so a key that is contained in another key must come after it.
GPU_PRICES: Mapping[str, float] = MappingProxyType(
    {
        "4090": 3500,
        "5090": 5000,
        "H100": 21000,
        "H200": 31000,
        "A6000": 6000,
        "A5000": 2000,
        "4000Ada": 1500,
    }
)

GPU_LIST_URL = (
    "https://jhdzwsjlmavfzceoshxo.supabase.co/functions/v1/api/public"
    "/gpu-earnings/gpus-list"
)
# The API caps the effective page size at 100
GPU_LIST_PAGE_SIZE = 100
GPU_LIST_QUERY: Mapping[str, str] = MappingProxyType(
    {
        "sort": "month-1-earnings",
        "order": "desc",
        "excludeZeroEarnings": "false",
        "onlyWithApr": "false",
    }
)

ERC20_TOTAL_SUPPLY = "erc20:totalSupply"

METHODOLOGY = (
    "TVL is calculated by summing: (1) The value of GPU NFTs in the protocol, "
    "priced per GPU model from a fixed valuation table, based on real-time GPU "
    "data from the Silicon.net API; and (2) The value of all fungible pool "
    "tokens produced by the protocol contract. GPU valuations reflect the "
    "estimated market value of compute hardware backing the protocol."
)
