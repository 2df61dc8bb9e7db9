from fastapi import APIRouter, Depends, Response
import httpx

from ...core.config import Settings
from ...core.errors import ProgramNotFoundError
from ...processors.feed_builder import build_feed
from ...services.program_fetcher import fetch_program
from ..common import logger, handle_api_exception, get_http_client, get_app_settings

router = APIRouter()

@router.get("/programmi/{program}")
async def program_feed(
    program: str,
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_app_settings),
):
    """
    Serve the RSS feed of a RaiPlay Sound program.
    Answers 404 with an empty body when upstream does not know the program.
    """
    logger.info(f"Received feed request for program: {program}")
    try:
        content_base_url = str(settings.RAIPLAYSOUND_URL)
        public_base_url = str(settings.PUBLIC_URL) if settings.PUBLIC_URL else None

        fetched = await fetch_program(client, content_base_url, program)
        body = build_feed(fetched, content_base_url, public_base_url)
        return Response(content=body, media_type="application/xml")
    except ProgramNotFoundError as e:
        logger.info(str(e))
        return Response(status_code=404)
    except Exception as e:
        handle_api_exception(e, f"building feed for program '{program}'")
