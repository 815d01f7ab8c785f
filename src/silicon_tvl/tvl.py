"""TVL entry points for Silicon.net.

TVL is reported in two independent parts:

1. ``gpu_tvl`` fetches every GPU NFT from the Silicon.net API, prices
   each by model and reports the sum as a USD value.
2. ``pool_token_tvl`` reads the total supply of the pool token and reports
   it as a raw token amount.

The two parts are never summed here; the API they report into owns that.
"""

from __future__ import annotations

from .adapters.pool_token import read_pool_token_supply
from .api import AdapterApi
from .clients.gpu_listing import fetch_all_gpus
from .clients.http import HttpGet, get_json
from .constants import CHAIN, METHODOLOGY, POOL_TOKEN
from .logger import get_logger
from .price_table import DEFAULT_PRICE_TABLE, PriceTable
from .processors.gpu_valuation import GpuValuation, compute_gpu_valuation

logger = get_logger(__name__)


async def gpu_tvl(
    api: AdapterApi,
    http_get: HttpGet = get_json,
    table: PriceTable = DEFAULT_PRICE_TABLE,
) -> GpuValuation:
    """Value all listed GPUs and report the total as USD."""
    fetched = await fetch_all_gpus(http_get)
    if not fetched.complete:
        logger.warning(
            "GPU listing incomplete after %d page(s); valuing %d GPUs gathered so far",
            fetched.pages_requested,
            len(fetched.gpus),
        )

    valuation = compute_gpu_valuation(fetched.gpus, table)
    api.add_usd_value(valuation.total_usd)
    return valuation


async def pool_token_tvl(api: AdapterApi, token: str = POOL_TOKEN) -> int | None:
    """Report the pool token total supply, keyed by the token address."""
    supply = await read_pool_token_supply(api, token)
    if supply is not None:
        api.add(token, supply)
    return supply


async def tvl(
    api: AdapterApi,
    http_get: HttpGet = get_json,
    table: PriceTable = DEFAULT_PRICE_TABLE,
    token: str = POOL_TOKEN,
) -> None:
    """Full chain TVL: GPU valuation followed by the pool token supply."""
    await gpu_tvl(api, http_get, table)
    await pool_token_tvl(api, token)


ADAPTER = {
    "methodology": METHODOLOGY,
    CHAIN: {"tvl": tvl},
}
