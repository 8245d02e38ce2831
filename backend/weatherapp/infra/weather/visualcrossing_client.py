from __future__ import annotations

import logging
import os
from typing import Optional
from urllib.parse import quote

import httpx

from weatherapp.domain.errors import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = (
    "https://weather.visualcrossing.com/VisualCrossingWebServices/rest/services/timeline"
)


class VisualCrossingClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        unit_group: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key or os.getenv("VISUALCROSSING_API_KEY")
        if not self.api_key:
            raise RuntimeError("VISUALCROSSING_API_KEY is required for VisualCrossingClient")
        self.base_url = (base_url or os.getenv("VISUALCROSSING_URL", DEFAULT_BASE_URL)).rstrip("/")
        self.unit_group = unit_group or os.getenv("VISUALCROSSING_UNIT_GROUP", "metric")
        if timeout is None:
            timeout = float(os.getenv("WEATHER_API_TIMEOUT", "10.0"))
        self.timeout = timeout
        self.transport = transport

    def fetch_timeline(self, city: str) -> Optional[dict]:
        url = f"{self.base_url}/{quote(city, safe='')}"
        params = {
            "key": self.api_key,
            "unitGroup": self.unit_group,
            "contentType": "json",
        }
        logger.debug("GET %s unitGroup=%s", url, self.unit_group)
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                resp = client.get(url, params=params)
                resp.raise_for_status()
                if not resp.content:
                    return None
                return resp.json()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            body = exc.response.text
            raise UpstreamError(
                f"{status} {exc.response.reason_phrase}: {body.strip() or 'no body'}",
                status,
                body=body,
            ) from exc
        except httpx.TransportError as exc:
            raise UpstreamError(f"weather service unreachable: {exc}", 503) from exc
        except ValueError as exc:
            raise UpstreamError(f"weather service returned invalid JSON: {exc}", 502) from exc
