"""
Results page endpoint: population pyramid for a set of zones.
"""
from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse, RedirectResponse

from popbuilder.database import PopulationDatabase, get_results_db
from popbuilder.rendering import TemplateRenderer, get_renderer, RESULTS_TEMPLATE
from popbuilder.services.summary_service import PopulationSummaryService
from popbuilder.utils.constants import BASE_URL, ZONES_FORM
from popbuilder.utils.zones import parse_zone_codes

router = APIRouter()


@router.api_route("/results", methods=["GET", "POST"], response_class=HTMLResponse)
def get_results(
    zones: str = Form("", alias=ZONES_FORM),
    db: PopulationDatabase = Depends(get_results_db),
    renderer: TemplateRenderer = Depends(get_renderer)
):
    """
    Show the population of the posted zones by age band and sex.
    
    - **zones**: comma-separated zone codes; an empty value redirects home
    """
    if not zones:
        return RedirectResponse(BASE_URL, status_code=302)
    
    service = PopulationSummaryService(db)
    summary = service.get_summary(parse_zone_codes(zones), zones=zones)
    
    return HTMLResponse(renderer.render(RESULTS_TEMPLATE, results=summary))
