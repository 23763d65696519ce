"""
Visit-state gate - decides between the intro page and the map page.

The state lives entirely in the visitor's cookies:

- ``skip`` (about a year) is set when the visitor opts out of the intro.
- ``seen`` (an hour) is set when the visitor continues past the intro
  without opting out. It is cleared again on the next visit to the
  home page, so it only carries the visitor through one redirect.

A visitor holding both cookies is treated as having opted out.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from popbuilder.utils.constants import (
    BASE_URL,
    SEEN_COOKIE,
    SKIP_COOKIE,
    SEEN_COOKIE_SECONDS,
    SKIP_COOKIE_SECONDS,
)


class VisitPage(str, Enum):
    """What the home page handler should send back."""
    INTRO = "intro"
    MAIN = "main"
    REDIRECT = "redirect"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class CookieOp:
    """A cookie to set with an expiry `seconds` from now, or to clear when `expire` is true."""
    name: str
    seconds: Optional[int] = None
    expire: bool = False


@dataclass
class VisitDecision:
    page: VisitPage
    cookies: List[CookieOp] = field(default_factory=list)


def decide_visit(
    path: str,
    has_skip_cookie: bool,
    has_seen_cookie: bool,
    posted: Optional[str] = None,
    skip_intro: Optional[str] = None
) -> VisitDecision:
    """
    Decide which page to serve on the home path and which cookies to change.
    
    Args:
        path: Request path; anything but the base path is not found
        has_skip_cookie: Whether the request carries the skip cookie
        has_seen_cookie: Whether the request carries the seen cookie
        posted: Value of the posted form field from a POST body
        skip_intro: Value of the skipintro form field from a POST body
        
    Returns:
        VisitDecision with the page and the cookie changes to apply
    """
    if path != BASE_URL:
        return VisitDecision(page=VisitPage.NOT_FOUND)
    
    if posted:
        if skip_intro:
            cookie = CookieOp(name=SKIP_COOKIE, seconds=SKIP_COOKIE_SECONDS)
        else:
            cookie = CookieOp(name=SEEN_COOKIE, seconds=SEEN_COOKIE_SECONDS)
        return VisitDecision(page=VisitPage.REDIRECT, cookies=[cookie])
    
    if has_skip_cookie:
        return VisitDecision(page=VisitPage.MAIN)
    
    if has_seen_cookie:
        return VisitDecision(
            page=VisitPage.MAIN,
            cookies=[CookieOp(name=SEEN_COOKIE, expire=True)]
        )
    
    return VisitDecision(page=VisitPage.INTRO)
