"""Raw recipe text conversion.

Endpoints:
- POST /api/posts/convert - Turn pasted text into form fields
"""

from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from ..schemas import ConvertRequest, ConvertResponse
from ..services.importer import ImporterService

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.post("/posts/convert", response_model=ConvertResponse)
@limiter.limit("30/minute")
def convert_text(
    request: Request,  # Required for rate limiter
    payload: ConvertRequest,
):
    """Convert pasted recipe text and merge it into the given form snapshot.

    Nothing is stored; the client reviews the form and saves it through
    POST /api/posts.
    """
    result, form = ImporterService().convert(payload.text, payload.form)
    return ConvertResponse(result=result, form=form)
