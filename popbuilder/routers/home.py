"""
Home page endpoint: the intro page or the map page.
"""
from fastapi import APIRouter, Cookie, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from typing import List, Optional

from popbuilder.rendering import TemplateRenderer, get_renderer, INTRO_PAGE, MAP_PAGE
from popbuilder.services.visit_gate import CookieOp, VisitPage, decide_visit
from popbuilder.utils.constants import (
    BASE_URL,
    POSTED_FORM,
    SKIP_FORM,
    SEEN_COOKIE,
    SKIP_COOKIE,
)

router = APIRouter()


def apply_cookies(response: Response, cookies: List[CookieOp]) -> None:
    """Write the gate's cookie changes to the response."""
    for cookie in cookies:
        if cookie.expire:
            response.delete_cookie(cookie.name)
        else:
            response.set_cookie(cookie.name, "true", expires=cookie.seconds)


@router.api_route(BASE_URL, methods=["GET", "POST"], response_class=HTMLResponse)
def home(
    request: Request,
    seen: Optional[str] = Cookie(None, alias=SEEN_COOKIE),
    skip: Optional[str] = Cookie(None, alias=SKIP_COOKIE),
    posted: Optional[str] = Form(None, alias=POSTED_FORM),
    skip_intro: Optional[str] = Form(None, alias=SKIP_FORM),
    renderer: TemplateRenderer = Depends(get_renderer)
):
    """
    Serve the intro to new visitors and the map to returning ones.
    
    - **posted**: set by the intro form; sets a cookie and redirects home
    - **skipintro**: opt out of the intro for about a year
    """
    if request.method != "POST":
        posted = skip_intro = None
    
    decision = decide_visit(
        path=request.url.path,
        has_skip_cookie=skip is not None,
        has_seen_cookie=seen is not None,
        posted=posted,
        skip_intro=skip_intro
    )
    
    if decision.page == VisitPage.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Not found")
    
    if decision.page == VisitPage.REDIRECT:
        response = RedirectResponse(BASE_URL, status_code=302)
    elif decision.page == VisitPage.MAIN:
        response = HTMLResponse(renderer.page(MAP_PAGE))
    else:
        response = HTMLResponse(renderer.page(INTRO_PAGE))
    
    apply_cookies(response, decision.cookies)
    return response
