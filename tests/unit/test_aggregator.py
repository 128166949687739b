"""
Unit tests for UserDataAggregator.

Tests cover:
- Composite result when every branch succeeds
- Failure isolation across all success/failure combinations
- Concurrent execution of the branches
- Join deadline for slow branches
- Injected logger receives branch failures
"""

import itertools
import threading
import time
from unittest.mock import MagicMock

import pytest

from polymarket_data.core.exceptions import DecodeError, NetworkError
from polymarket_data.domain.models import AggregateOptions, PnLInterval, PositionsQuery
from polymarket_data.domain.views import UserData
from polymarket_data.services import PolymarketDataService, UserDataAggregator

from tests.conftest import (
    PNL_PAYLOAD,
    PORTFOLIO_PAYLOAD,
    POSITIONS_PAYLOAD,
    RecordingFetcher,
    USER_ID,
)


BRANCH_ROUTES = {
    "portfolio": "/value",
    "pnl": "/user-pnl",
    "positions": "/positions",
}


# =============================================================================
# SUCCESS
# =============================================================================


class TestAggregateSuccess:
    """Tests for the all-success path."""

    def test_all_branches_populated(self, aggregator: UserDataAggregator):
        user_data = aggregator.aggregate(USER_ID)

        assert isinstance(user_data, UserData)
        assert user_data.portfolio_value == 1209.4328514150002
        assert [p.p for p in user_data.pnl] == [317.79596, 318.5, 320.25]
        assert len(user_data.positions) == 2

    def test_options_reach_the_requests(
        self,
        aggregator: UserDataAggregator,
        fetcher: RecordingFetcher,
    ):
        """
        GIVEN weekly PnL and a custom positions limit
        WHEN I aggregate
        THEN the PnL request uses the weekly default fidelity and the positions limit
        """
        options = AggregateOptions(
            pnl_interval=PnLInterval.WEEK,
            positions=PositionsQuery(limit=5),
        )

        aggregator.aggregate(USER_ID, options)

        assert fetcher.calls_to("/user-pnl")[0].endswith("interval=1w&fidelity=3h")
        assert "limit=5" in fetcher.calls_to("/positions")[0]

    def test_default_options_use_one_day_pnl(
        self,
        aggregator: UserDataAggregator,
        fetcher: RecordingFetcher,
    ):
        aggregator.aggregate(USER_ID)

        assert fetcher.calls_to("/user-pnl")[0].endswith("interval=1d&fidelity=1h")

    def test_second_aggregate_served_from_cache(
        self,
        aggregator: UserDataAggregator,
        fetcher: RecordingFetcher,
    ):
        first = aggregator.aggregate(USER_ID)
        second = aggregator.aggregate(USER_ID)

        assert first == second
        assert len(fetcher.calls) == 3


# =============================================================================
# FAILURE ISOLATION
# =============================================================================


class TestFailureIsolation:
    """Tests for per-branch failure isolation."""

    @pytest.mark.parametrize(
        "outcomes",
        list(itertools.product([True, False], repeat=3)),
        ids=lambda o: "-".join("ok" if x else "fail" for x in o),
    )
    def test_every_success_failure_combination(
        self,
        fetcher: RecordingFetcher,
        aggregator: UserDataAggregator,
        outcomes,
    ):
        """
        GIVEN each branch either succeeds or fails
        WHEN I aggregate
        THEN succeeded branches carry values, failed ones are None, and nothing raises
        """
        portfolio_ok, pnl_ok, positions_ok = outcomes
        if not portfolio_ok:
            fetcher.routes["/value"] = NetworkError("HTTP 500", status_code=500)
        if not pnl_ok:
            fetcher.routes["/user-pnl"] = b"not json"
        if not positions_ok:
            fetcher.routes["/positions"] = NetworkError("connection reset")

        user_data = aggregator.aggregate(USER_ID)

        assert (user_data.portfolio_value is not None) == portfolio_ok
        assert (user_data.pnl is not None) == pnl_ok
        assert (user_data.positions is not None) == positions_ok

    @pytest.mark.parametrize(
        "error",
        [
            NetworkError("offline"),
            DecodeError("bad shape"),
            RuntimeError("unexpected"),
            KeyError("missing"),
        ],
    )
    def test_any_exception_type_is_isolated(
        self,
        fetcher: RecordingFetcher,
        aggregator: UserDataAggregator,
        error,
    ):
        fetcher.routes["/value"] = error

        user_data = aggregator.aggregate(USER_ID)

        assert user_data.portfolio_value is None
        assert user_data.pnl is not None
        assert user_data.positions is not None

    def test_invalid_request_yields_all_absent(
        self,
        aggregator: UserDataAggregator,
        fetcher: RecordingFetcher,
    ):
        user_data = aggregator.aggregate("")

        assert user_data == UserData(portfolio_value=None, pnl=None, positions=None)
        assert fetcher.calls == []

    def test_malformed_pnl_points_do_not_fail_branch(
        self,
        fetcher: RecordingFetcher,
        aggregator: UserDataAggregator,
    ):
        fetcher.routes["/user-pnl"] = b'[{"t": 1745971200, "p": "oops"}]'

        user_data = aggregator.aggregate(USER_ID)

        assert user_data.pnl == []

    def test_failures_are_logged_through_injected_logger(
        self,
        fetcher: RecordingFetcher,
        data_service: PolymarketDataService,
    ):
        logger = MagicMock()
        aggregator = UserDataAggregator(data_service=data_service, logger=logger)
        fetcher.routes["/positions"] = NetworkError("offline")

        aggregator.aggregate(USER_ID)

        logger.warning.assert_called_once()
        args = logger.warning.call_args.args
        assert "positions" in args
        assert USER_ID in args


# =============================================================================
# CONCURRENCY
# =============================================================================


class TestConcurrency:
    """Tests for concurrent execution and the join barrier."""

    def test_branches_run_concurrently(
        self,
        fetcher: RecordingFetcher,
        aggregator: UserDataAggregator,
    ):
        """
        GIVEN every endpoint waits until all three requests are in flight
        WHEN I aggregate
        THEN all branches succeed, which is only possible if they overlap
        """
        in_flight = threading.Barrier(3, timeout=5)

        def gated(payload: bytes):
            def respond(url: str) -> bytes:
                in_flight.wait()
                return payload
            return respond

        fetcher.routes["/value"] = gated(PORTFOLIO_PAYLOAD)
        fetcher.routes["/user-pnl"] = gated(PNL_PAYLOAD)
        fetcher.routes["/positions"] = gated(POSITIONS_PAYLOAD)

        user_data = aggregator.aggregate(USER_ID)

        assert user_data.portfolio_value is not None
        assert user_data.pnl is not None
        assert user_data.positions is not None

    def test_waits_for_slow_branch_without_deadline(
        self,
        fetcher: RecordingFetcher,
        aggregator: UserDataAggregator,
    ):
        def slow(url: str) -> bytes:
            time.sleep(0.2)
            return POSITIONS_PAYLOAD

        fetcher.routes["/positions"] = slow

        user_data = aggregator.aggregate(USER_ID)

        assert len(user_data.positions) == 2

    def test_failing_branch_does_not_wait_for_slow_branch_to_fail(
        self,
        fetcher: RecordingFetcher,
        aggregator: UserDataAggregator,
    ):
        """
        GIVEN one branch fails immediately and another is slow but succeeds
        WHEN I aggregate
        THEN the slow branch's value is still returned
        """
        def slow(url: str) -> bytes:
            time.sleep(0.2)
            return PNL_PAYLOAD

        fetcher.routes["/value"] = NetworkError("offline")
        fetcher.routes["/user-pnl"] = slow

        user_data = aggregator.aggregate(USER_ID)

        assert user_data.portfolio_value is None
        assert len(user_data.pnl) == 3

    def test_deadline_reports_unfinished_branch_absent(
        self,
        fetcher: RecordingFetcher,
        data_service: PolymarketDataService,
    ):
        """
        GIVEN a 0.2s join deadline
        AND the positions endpoint hangs
        WHEN I aggregate
        THEN the call returns near the deadline with positions absent and other branches intact
        """
        release = threading.Event()

        def hang(url: str) -> bytes:
            release.wait(timeout=5)
            return POSITIONS_PAYLOAD

        fetcher.routes["/positions"] = hang
        logger = MagicMock()
        aggregator = UserDataAggregator(
            data_service=data_service,
            timeout_seconds=0.2,
            logger=logger,
        )

        started = time.monotonic()
        try:
            user_data = aggregator.aggregate(USER_ID)
            elapsed = time.monotonic() - started
        finally:
            release.set()

        assert elapsed < 2
        assert user_data.portfolio_value is not None
        assert user_data.pnl is not None
        assert user_data.positions is None
        logger.warning.assert_called_once()
