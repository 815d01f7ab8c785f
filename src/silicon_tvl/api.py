"""Per-chain adapter API: on-chain view calls plus value reporting."""

from __future__ import annotations

import asyncio
from typing import Any, Protocol

from eth_typing import URI
from web3 import Web3

from .abi import resolve_function_abi
from .balances import TvlBalances
from .logger import get_logger

logger = get_logger(__name__)


class AdapterApi(Protocol):
    """What an entry point needs from its harness."""

    async def call(
        self,
        target: str,
        abi: str | dict[str, Any],
        params: tuple[Any, ...] = (),
        permit_failure: bool = False,
    ) -> Any: ...

    def add(self, token: str, amount: int) -> None: ...

    def add_usd_value(self, amount: float) -> None: ...


class ChainApi:
    """Web3-backed adapter API for a single chain.

    View calls run in a worker thread so they do not block the event loop.
    Reported values accumulate on ``balances``.
    """

    def __init__(
        self,
        chain: str,
        rpc_url: str,
        *,
        block_number: int | None = None,
        w3: Web3 | None = None,
        balances: TvlBalances | None = None,
    ):
        """Initialize the API.

        Args:
            chain: Chain name reported with the balances
            rpc_url: JSON-RPC endpoint for the chain
            block_number: Block to read at; latest when None
            w3: Pre-built Web3 instance, mainly for tests
            balances: Collector to report into; a fresh one when None
        """
        self.chain = chain
        self.rpc_url = rpc_url
        self.block_identifier: int | str = (
            block_number if block_number is not None else "latest"
        )
        self.w3 = w3 or Web3(Web3.HTTPProvider(URI(rpc_url)))
        self.balances = balances or TvlBalances(chain=chain)

    async def call(
        self,
        target: str,
        abi: str | dict[str, Any],
        params: tuple[Any, ...] = (),
        permit_failure: bool = False,
    ) -> Any:
        """Execute a view call on ``target``.

        Args:
            target: Contract address
            abi: Function ABI fragment or shorthand like "erc20:totalSupply"
            params: Positional call arguments
            permit_failure: Return None instead of raising when the call fails

        Returns:
            The decoded return value, or None on a permitted failure
        """
        try:
            fn_abi = resolve_function_abi(abi)
            contract = self.w3.eth.contract(
                address=Web3.to_checksum_address(target), abi=[fn_abi]
            )
            fn = getattr(contract.functions, fn_abi["name"])(*params)
            return await asyncio.to_thread(
                fn.call, block_identifier=self.block_identifier
            )
        except Exception as e:
            if not permit_failure:
                raise
            logger.debug(
                "Permitted call failure on %s (%s): %s",
                target,
                abi if isinstance(abi, str) else abi.get("name"),
                e,
            )
            return None

    def add(self, token: str, amount: int) -> None:
        self.balances.add(token, amount)

    def add_usd_value(self, amount: float) -> None:
        self.balances.add_usd_value(amount)
