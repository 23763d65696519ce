"""
Download endpoint: per-zone population by five-year band as CSV.
"""
from fastapi import APIRouter, Depends, Form
from fastapi.responses import RedirectResponse, Response

from popbuilder.database import PopulationDatabase, get_download_db
from popbuilder.rendering import TemplateRenderer, get_renderer, DOWNLOAD_TEMPLATE
from popbuilder.services.detail_service import PopulationDetailService
from popbuilder.utils.constants import BASE_URL, DETAIL_COLUMNS, DOWNLOAD_FILENAME, ZONES_FORM
from popbuilder.utils.zones import parse_zone_codes

router = APIRouter()


@router.api_route("/download", methods=["GET", "POST"])
def get_download(
    zones: str = Form("", alias=ZONES_FORM),
    db: PopulationDatabase = Depends(get_download_db),
    renderer: TemplateRenderer = Depends(get_renderer)
):
    """
    Send the population of each posted zone as a CSV attachment.
    
    - **zones**: comma-separated zone codes; an empty value redirects home
    """
    if not zones:
        return RedirectResponse(BASE_URL, status_code=302)
    
    service = PopulationDetailService(db)
    rows = service.get_detail(parse_zone_codes(zones))
    body = renderer.render(DOWNLOAD_TEMPLATE, columns=DETAIL_COLUMNS, rows=rows)
    
    return Response(
        content=body,
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f"attachment; filename={DOWNLOAD_FILENAME}",
            # Older versions of IE need these for the download to work
            "Cache-Control": "must-revalidate, post-check=0, pre-check=0",
            "Pragma": "public",
        }
    )
