"""
Fetch program documents from the RaiPlay Sound JSON API.
"""
import httpx
from pydantic import ValidationError

from ..core.errors import ProgramFetchError, ProgramNotFoundError
from ..core.logging_config import get_logger
from ..models.program import RaiPlayProgram
from ..processors.url_utils import URLTypes

logger = get_logger(__name__)

def program_url(base_url: URLTypes, program: str) -> httpx.URL:
    """Return the JSON endpoint of a program; the path of base_url is replaced."""
    base = base_url if isinstance(base_url, httpx.URL) else httpx.URL(base_url)
    return base.copy_with(path=f"/programmi/{program}.json")

async def fetch_program(client: httpx.AsyncClient, base_url: URLTypes, program: str) -> RaiPlayProgram:
    """
    Fetch and parse a single program. No retries are attempted.

    Args:
        client: HTTP client used for the request
        base_url: Upstream content host
        program: Program identifier, used verbatim as a path segment

    Returns:
        The parsed program

    Raises:
        ProgramNotFoundError: If upstream answers with anything but 200
        ProgramFetchError: On network failure or an unparseable body
    """
    url = program_url(base_url, program)
    logger.info(f"Fetching program '{program}' from {url}")

    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        logger.error(f"Error fetching program '{program}': {str(e)}")
        raise ProgramFetchError(f"Failed to fetch program '{program}': {str(e)}") from e

    if response.status_code != 200:
        logger.warning(f"Upstream returned status {response.status_code} for program '{program}'")
        raise ProgramNotFoundError(program, response.status_code)

    try:
        return RaiPlayProgram.model_validate_json(response.content)
    except ValidationError as e:
        logger.error(f"Invalid program document for '{program}': {str(e)}")
        raise ProgramFetchError(f"Failed to parse program '{program}': {str(e)}") from e
