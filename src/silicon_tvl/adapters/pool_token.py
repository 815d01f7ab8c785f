from __future__ import annotations

from ..api import AdapterApi
from ..constants import ERC20_TOTAL_SUPPLY, POOL_TOKEN
from ..logger import get_logger

logger = get_logger(__name__)


async def read_pool_token_supply(api: AdapterApi, token: str = POOL_TOKEN) -> int | None:
    """Read the raw ``totalSupply()`` of the pool token.

    The call is made with failures permitted, so a bad address or node
    error yields None instead of an exception.

    Returns:
        Total supply in raw token units, or None if it could not be read
    """
    supply = await api.call(target=token, abi=ERC20_TOTAL_SUPPLY, permit_failure=True)
    if supply is None:
        logger.warning("Could not read totalSupply of pool token %s", token)
        return None

    logger.info("Pool token %s total supply: %d", token, supply)
    return int(supply)
