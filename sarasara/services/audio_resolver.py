"""
Resolve audio URLs by following temporary redirects and stream the result.

Any absolute URL a caller passes in is fetched and proxied; there is no
allow-list of audio hosts because episodes are spread over many CDNs. Keep
this in mind before exposing the service publicly.
"""
import httpx
from starlette.background import BackgroundTask
from fastapi.responses import PlainTextResponse, Response, StreamingResponse

from ..core.errors import AudioFetchError, InvalidUrlError
from ..core.logging_config import get_logger
from ..processors.url_utils import parse_absolute_url

logger = get_logger(__name__)

MAX_REDIRECTS = 3

# Compared against lowercased header names. Limited to these four names;
# every other upstream header, hop-by-hop ones included, is forwarded as is.
EXCLUDED_HEADERS = frozenset({
    "host",
    "origin",
    "src-fetch-mode",
    "src-fetch-site",
})

MISSING_LOCATION_MESSAGE = "received 302 but no Location header found"
UNEXPECTED_STATUS_MESSAGE = "received unexpected status code"
TOO_MANY_REDIRECTS_MESSAGE = "too many redirects!"

def passthrough_response(upstream: httpx.Response) -> StreamingResponse:
    """
    Wrap a streamed upstream 200 response, copying all but the excluded headers.

    The body is forwarded chunk by chunk as received, and the upstream
    response is closed once it has been sent.
    """
    response = StreamingResponse(
        upstream.aiter_raw(),
        status_code=200,
        background=BackgroundTask(upstream.aclose),
    )
    for name, value in upstream.headers.multi_items():
        if name.lower() not in EXCLUDED_HEADERS:
            response.headers.append(name, value)
    return response

async def resolve_audio(client: httpx.AsyncClient, url: httpx.URL) -> Response:
    """
    Follow up to MAX_REDIRECTS 302 responses starting at url.

    Args:
        client: HTTP client; it must not follow redirects by itself
        url: Absolute URL to start from

    Returns:
        A streaming 200 response, or a text/plain error response

    Raises:
        AudioFetchError: On network failure talking to any hop
    """
    current_url = url

    for hop in range(MAX_REDIRECTS):
        logger.info(f"Resolving audio hop {hop + 1}/{MAX_REDIRECTS}: {current_url}")
        request = client.build_request("GET", current_url)
        try:
            upstream = await client.send(request, stream=True, follow_redirects=False)
        except httpx.HTTPError as e:
            logger.error(f"Error requesting {current_url}: {str(e)}")
            raise AudioFetchError(f"Failed to fetch {current_url}: {str(e)}") from e

        if upstream.status_code == 200:
            return passthrough_response(upstream)

        await upstream.aclose()

        if upstream.status_code == 302:
            locations = upstream.headers.get_list("location")
            if not locations:
                logger.warning(f"302 without Location header from {current_url}")
                return PlainTextResponse(MISSING_LOCATION_MESSAGE, status_code=500)
            try:
                current_url = parse_absolute_url(locations[-1])
            except InvalidUrlError as e:
                logger.warning(f"Invalid Location header {locations[-1]!r} from {current_url}: {str(e)}")
                return PlainTextResponse(str(e), status_code=500)
            continue

        logger.warning(f"Unexpected status {upstream.status_code} from {current_url}")
        return PlainTextResponse(UNEXPECTED_STATUS_MESSAGE, status_code=upstream.status_code)

    logger.warning(f"Gave up on {url} after {MAX_REDIRECTS} requests")
    return PlainTextResponse(TOO_MANY_REDIRECTS_MESSAGE, status_code=500)
