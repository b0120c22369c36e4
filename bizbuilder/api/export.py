"""POST /api/export endpoint"""

from enum import Enum

from fastapi import APIRouter, Response

from bizbuilder.models.schemas import RenderedSite
from bizbuilder.preview.export import DOWNLOAD_FILENAME, build_clipboard_text, build_download_text

router = APIRouter()


class ExportFormat(str, Enum):
    DOWNLOAD = "download"
    CLIPBOARD = "clipboard"


@router.post("/export")
async def export_site(site: RenderedSite, format: ExportFormat = ExportFormat.DOWNLOAD) -> Response:
    """
    Bundle html/css/js into one text document.

    Accepts a full GeneratedWebsite payload (only html, css and js are
    read). ``download`` is served as an attachment named website-files.txt.
    """
    if format == ExportFormat.CLIPBOARD:
        return Response(content=build_clipboard_text(site), media_type="text/plain; charset=utf-8")

    return Response(
        content=build_download_text(site),
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{DOWNLOAD_FILENAME}"'},
    )
