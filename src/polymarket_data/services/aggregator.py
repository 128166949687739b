"""Concurrent fan-out over the user data endpoints."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Callable, Optional

from polymarket_data.domain.models import AggregateOptions
from polymarket_data.domain.views import UserData
from polymarket_data.services.data_service import PolymarketDataService

_module_logger = logging.getLogger(__name__)


class UserDataAggregator:
    """
    Builds a UserData snapshot from the portfolio, PnL and positions branches.

    The branches run concurrently. A branch that fails, or that is still
    running when the optional deadline passes, is logged and reported as None;
    the other branches are unaffected. aggregate() never raises.
    """

    def __init__(
        self,
        data_service: PolymarketDataService,
        timeout_seconds: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._data = data_service
        self._timeout = timeout_seconds
        self._logger = logger or _module_logger

    def aggregate(self, user_id: str, options: Optional[AggregateOptions] = None) -> UserData:
        """Fetch all branches for user_id and join them once every one is done."""
        options = options or AggregateOptions()

        branches: dict[str, Callable[[], Any]] = {
            "portfolio": lambda: self._data.fetch_portfolio(user_id),
            "pnl": lambda: self._data.fetch_pnl(
                user_id, options.pnl_interval, options.pnl_fidelity
            ),
            "positions": lambda: self._data.fetch_positions(user_id, options.positions),
        }

        executor = ThreadPoolExecutor(
            max_workers=len(branches),
            thread_name_prefix="user-data",
        )
        try:
            futures = {name: executor.submit(fn) for name, fn in branches.items()}
            done, _ = wait(futures.values(), timeout=self._timeout)
            results = {
                name: self._branch_result(name, user_id, future, future in done)
                for name, future in futures.items()
            }
        finally:
            # Without a deadline every branch has already finished here
            executor.shutdown(wait=self._timeout is None, cancel_futures=True)

        return UserData(
            portfolio_value=results["portfolio"],
            pnl=results["pnl"],
            positions=results["positions"],
        )

    def _branch_result(self, name: str, user_id: str, future: Future, finished: bool) -> Any:
        if not finished:
            future.cancel()
            self._logger.warning(
                "Fetching %s for %s did not finish within %ss", name, user_id, self._timeout
            )
            return None
        try:
            return future.result()
        except Exception as e:
            self._logger.warning("Failed to fetch %s for %s: %s", name, user_id, e)
            return None
