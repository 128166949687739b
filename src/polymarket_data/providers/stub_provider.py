"""Stub raw fetcher serving canned payloads for offline/testing use."""

import json
import random
from typing import Any

import httpx

from polymarket_data.core.exceptions import NetworkError

_STUB_PORTFOLIO_VALUE = 1209.4328514150002

# Series end at a fixed instant so repeated runs produce identical payloads
_STUB_SERIES_END = 1745971200

_FIDELITY_SECONDS: dict[str, int] = {
    "1d": 86400,
    "18h": 64800,
    "12h": 43200,
    "3h": 10800,
    "1h": 3600,
}

_INTERVAL_SECONDS: dict[str, int] = {
    "max": 180 * 86400,
    "1m": 30 * 86400,
    "1w": 7 * 86400,
    "1d": 86400,
    "12h": 43200,
    "6h": 21600,
}

_STUB_POSITIONS: list[dict[str, Any]] = [
    {
        "proxyWallet": "0x235a480a9ccb7ada0ad2dc11dac3a11fb433febd",
        "asset": "21742633143463906290569050155826241533067272736897614950488156847949938836455",
        "conditionId": "0xdd22472e552920b8438158ea7238bfadfa4f736aa4cee91a6b86c39ead110917",
        "size": 1520.5,
        "avgPrice": 0.41,
        "initialValue": 623.405,
        "currentValue": 714.635,
        "cashPnl": 91.23,
        "percentPnl": 14.634,
        "totalBought": 1520.5,
        "realizedPnl": 0.0,
        "percentRealizedPnl": 0.0,
        "curPrice": 0.47,
        "redeemable": False,
        "mergeable": False,
        "title": "Will the Fed cut rates in June?",
        "slug": "will-the-fed-cut-rates-in-june",
        "icon": "https://polymarket-upload.s3.us-east-2.amazonaws.com/fed.png",
        "eventSlug": "fed-decision-in-june",
        "outcome": "Yes",
        "outcomeIndex": 0,
        "oppositeOutcome": "No",
        "oppositeAsset": "48331043336612883890938759509493159234755048973500640148014422747788308965732",
        "endDate": "2025-06-18",
        "negativeRisk": False,
    },
    {
        "proxyWallet": "0x235a480a9ccb7ada0ad2dc11dac3a11fb433febd",
        "asset": "69236923620077691027083946871148646972011131466059644796654161903044970987404",
        "conditionId": "0x9c1a953fe92c8357f1b646ba25d983aa83e90c525992db14fb726fa895cb5763",
        "size": 310.0,
        "avgPrice": 0.62,
        "initialValue": 192.2,
        "currentValue": 173.6,
        "cashPnl": -18.6,
        "percentPnl": -9.677,
        "totalBought": 400.0,
        "realizedPnl": 12.5,
        "percentRealizedPnl": 6.5,
        "curPrice": 0.56,
        "redeemable": False,
        "mergeable": True,
        "title": "Will Bitcoin reach $120k in 2025?",
        "slug": "will-bitcoin-reach-120k-in-2025",
        "icon": "https://polymarket-upload.s3.us-east-2.amazonaws.com/btc.png",
        "eventSlug": "bitcoin-price-2025",
        "outcome": "No",
        "outcomeIndex": 1,
        "oppositeOutcome": "Yes",
        "oppositeAsset": "10131254934960442213513440934440838212567298345113702432226530932372016066321",
        "endDate": "2025-12-31T12:00:00Z",
        "negativeRisk": True,
    },
]

_STUB_EVENTS: list[dict[str, Any]] = [
    {
        "id": "16085",
        "title": "Fed decision in June?",
        "slug": "fed-decision-in-june",
        "description": "Outcome of the June FOMC meeting.",
        "imageUrl": "https://polymarket-upload.s3.us-east-2.amazonaws.com/fed.png",
        "endDate": "2025-06-18T00:00:00Z",
        "volume": 48210933.12,
        "liquidity": 1530220.5,
    },
    {
        "id": "17311",
        "title": "Bitcoin price in 2025",
        "slug": "bitcoin-price-2025",
    },
]


class StubFetcher:
    """
    Stub fetcher with deterministic payloads for every supported endpoint.

    PnL series are generated from the requested interval and fidelity with a
    seeded random walk; everything else is fixed.
    """

    def __init__(self, seed: int = 42):
        self._seed = seed

    def get(self, url: str) -> bytes:
        parsed = httpx.URL(url)
        params = parsed.params
        path = parsed.path

        if path.endswith("/value"):
            body: Any = [{"user": params.get("user", ""), "value": _STUB_PORTFOLIO_VALUE}]
        elif path.endswith("/user-pnl"):
            body = self._pnl_series(params.get("interval", "1d"), params.get("fidelity", "1h"))
        elif path.endswith("/positions"):
            limit = int(params.get("limit", "50"))
            offset = int(params.get("offset", "0"))
            body = _STUB_POSITIONS[offset:offset + limit]
        elif path.endswith("/events/search"):
            query = params.get("_q", "").lower()
            events = [e for e in _STUB_EVENTS if query in e["title"].lower()]
            body = {"events": events, "hasMore": False}
        else:
            raise NetworkError(f"GET {url} returned HTTP 404", status_code=404)

        return json.dumps(body).encode("utf-8")

    def _pnl_series(self, interval: str, fidelity: str) -> list[dict[str, Any]]:
        rng = random.Random(f"{self._seed}:{interval}:{fidelity}")
        step = _FIDELITY_SECONDS.get(fidelity, 3600)
        span = _INTERVAL_SECONDS.get(interval, 86400)
        value = 300.0
        points = []
        for t in range(_STUB_SERIES_END - span, _STUB_SERIES_END + 1, step):
            value += (rng.random() - 0.5) * 10
            # The live API sends prices as numbers or numeric strings
            price: Any = round(value, 5)
            if len(points) % 2:
                price = str(price)
            points.append({"t": t, "p": price})
        return points
