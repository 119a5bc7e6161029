"""Shared JSON GET with retry and rate-limit handling for upstream providers."""

import logging
import time
from typing import Any

import httpx

from summit.errors import MalformedProviderResponse

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "summit-forecast/0.1.0"
RETRY_STATUS_CODES = (429, 503)


def get_json(
    url: str,
    params: dict[str, Any] | None = None,
    *,
    source: str,
    user_agent: str = DEFAULT_USER_AGENT,
    accept: str = "application/json",
    timeout: float = 30.0,
    max_retries: int = 3,
    retry_base_delay: float = 2.0,
) -> Any:
    """GET ``url`` and decode the JSON body.

    Retries on 503/429 and transport errors with exponential backoff. Other
    HTTP errors raise httpx.HTTPStatusError immediately. A body that is not
    JSON raises MalformedProviderResponse.
    """
    headers = {"User-Agent": user_agent, "Accept": accept}

    last_error: Exception | None = None
    for attempt in range(max_retries + 1):
        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=timeout)
            if resp.status_code in RETRY_STATUS_CODES and attempt < max_retries:
                delay = retry_base_delay * (2**attempt)
                logger.warning(
                    "%s %s returned %d, retrying in %.1fs (attempt %d/%d)",
                    source, url, resp.status_code, delay, attempt + 1, max_retries,
                )
                time.sleep(delay)
                continue
            if resp.status_code >= 400:
                logger.error(
                    "%s %s returned %d: %s",
                    source, url, resp.status_code, resp.text[:500],
                )
            resp.raise_for_status()
            try:
                return resp.json()
            except ValueError as e:
                logger.error("%s %s returned a non-JSON body: %s", source, url, resp.text[:200])
                raise MalformedProviderResponse(
                    f"{source} returned a non-JSON body from {url}"
                ) from e
        except httpx.RequestError as e:
            last_error = e
            if attempt < max_retries:
                delay = retry_base_delay * (2**attempt)
                logger.warning(
                    "%s request error, retrying in %.1fs: %s", source, delay, e
                )
                time.sleep(delay)
                continue
            logger.error("%s request failed: %s", source, e)
            raise

    assert last_error is not None
    raise last_error


class JsonClient:
    """Base for provider clients: holds connection settings and issues GETs."""

    source = "upstream"

    def __init__(
        self,
        base_url: str,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_base_delay: float = 2.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def _get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        accept: str = "application/json",
    ) -> Any:
        return get_json(
            f"{self.base_url}{path}",
            params,
            source=self.source,
            user_agent=self.user_agent,
            accept=accept,
            timeout=self.timeout,
            max_retries=self.max_retries,
            retry_base_delay=self.retry_base_delay,
        )
