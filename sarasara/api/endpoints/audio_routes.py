from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
import httpx

from ...core.errors import AudioFetchError, InvalidUrlError
from ...processors.url_utils import parse_absolute_url
from ...services.audio_resolver import resolve_audio
from ..common import logger, handle_api_exception, get_http_client

router = APIRouter()

@router.get("/audio")
async def proxy_audio(url: str, client: httpx.AsyncClient = Depends(get_http_client)):
    """
    Stream an audio file, following temporary redirects on the client's behalf.
    """
    try:
        target = parse_absolute_url(url)
    except InvalidUrlError as e:
        logger.warning(f"Rejected audio url {url!r}: {str(e)}")
        return PlainTextResponse(str(e), status_code=500)

    try:
        return await resolve_audio(client, target)
    except AudioFetchError as e:
        handle_api_exception(e, "fetching audio", status_code=502)
