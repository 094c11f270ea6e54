"""HTTP transport for downloading the feed."""

import requests

from fuel_surcharge_feed.exceptions import TransportException

DEFAULT_TIMEOUT = 10.0
USER_AGENT = "fuel-surcharge-feed/0.1.0"


def fetch_feed(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Download the raw feed text.

    Args:
        url: Feed URL
        timeout: Timeout for the HTTP request in seconds

    Returns:
        The response body as text

    Raises:
        TransportError: On connection failure, timeout or a non-2xx status
    """
    try:
        response = requests.get(
            url,
            headers={"Accept": "application/xml, text/xml", "User-Agent": USER_AGENT},
            timeout=timeout,
        )
        response.raise_for_status()
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else None
        raise TransportException(
            f"Feed request to {url} failed with HTTP {status}",
            url=url,
            status_code=status,
            original_error=exc,
        ) from exc
    except requests.RequestException as exc:
        raise TransportException(
            f"Feed request to {url} failed: {exc}",
            url=url,
            original_error=exc,
        ) from exc

    return response.text
