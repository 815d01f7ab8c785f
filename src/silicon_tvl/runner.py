"""Local harness that runs the TVL entry points once."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum

from .api import ChainApi
from .balances import TvlBalances
from .clients.http import HttpGet, get_json
from .constants import CHAIN
from .processors.gpu_valuation import GpuValuation
from .state import AppState
from .tvl import gpu_tvl, pool_token_tvl


class Target(str, Enum):
    GPUS = "gpus"
    POOL_TOKEN = "pool-token"
    ALL = "all"


@dataclass
class RunResult:
    balances: TvlBalances
    valuation: GpuValuation | None = None
    pool_token_supply: int | None = None


def build_http_get(state: AppState) -> HttpGet:
    """GET helper honouring the configured request timeout."""
    return functools.partial(get_json, timeout=state.settings.http_timeout)


def build_api(state: AppState) -> ChainApi:
    s = state.settings
    return ChainApi(CHAIN, s.rpc_url, block_number=s.block_number)


async def run_tvl(
    state: AppState,
    target: Target = Target.ALL,
    api: ChainApi | None = None,
    http_get: HttpGet | None = None,
) -> RunResult:
    """Run the selected entry point(s) against one chain API.

    Args:
        state: Application state containing settings and logger
        target: Which entry point to run; ALL runs both in sequence
        api: Adapter API to report into; built from settings when None
        http_get: GET helper for the GPU listing; built from settings when None

    Returns:
        RunResult with the reported balances and the per-stage readings
    """
    log = state.logger
    chain_api = api if api is not None else build_api(state)
    getter = http_get if http_get is not None else build_http_get(state)

    log.info("Starting TVL run", extra={"chain": CHAIN, "target": target.value})

    valuation: GpuValuation | None = None
    supply: int | None = None
    if target in (Target.GPUS, Target.ALL):
        valuation = await gpu_tvl(chain_api, getter)
    if target in (Target.POOL_TOKEN, Target.ALL):
        supply = await pool_token_tvl(chain_api)

    log.info("TVL run completed", extra={"chain": CHAIN})
    return RunResult(
        balances=chain_api.balances,
        valuation=valuation,
        pool_token_supply=supply,
    )
