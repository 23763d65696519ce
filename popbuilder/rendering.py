"""
Template loading and rendering.
"""
import logging
import os
from typing import Any, Dict

from fastapi import Request
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from popbuilder.exceptions import RenderError

logger = logging.getLogger(__name__)

# Templates filled in per request
RESULTS_TEMPLATE = "results.html"
DOWNLOAD_TEMPLATE = "download.txt"
ERROR_TEMPLATE = "error.html"

# Pages served as they are
INTRO_PAGE = "intro.html"
MAP_PAGE = "map.html"
NOT_FOUND_PAGE = "notfound.html"

TEMPLATES = [RESULTS_TEMPLATE, DOWNLOAD_TEMPLATE, ERROR_TEMPLATE]
PAGES = [INTRO_PAGE, MAP_PAGE, NOT_FOUND_PAGE]


class TemplateRenderer:
    """
    Holds the compiled templates and the static pages.
    
    Everything is loaded once by `load()`; a missing or broken template
    stops the application from starting.
    """
    
    def __init__(self, template_dir: str):
        self.template_dir = template_dir
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._templates: Dict[str, Any] = {}
        self._pages: Dict[str, str] = {}
    
    def load(self) -> None:
        """
        Compile every template and read every static page.
        
        Raises:
            RenderError: If any file is missing or does not compile
        """
        for name in TEMPLATES:
            try:
                self._templates[name] = self.env.get_template(name)
            except TemplateError as e:
                raise RenderError(f"Could not load template {name}: {e}") from e
        
        for name in PAGES:
            path = os.path.join(self.template_dir, name)
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    self._pages[name] = f.read()
            except OSError as e:
                raise RenderError(f"Could not load page {name}: {e}") from e
        
        logger.info(f"Loaded templates from {self.template_dir}")
    
    def render(self, name: str, **data: Any) -> str:
        """
        Fill a template with data.
        
        Raises:
            RenderError: If the template is unknown or fails to render
        """
        template = self._templates.get(name)
        if template is None:
            raise RenderError(f"Template {name} is not loaded")
        
        try:
            return template.render(**data)
        except TemplateError as e:
            raise RenderError(f"Could not render template {name}: {e}") from e
    
    def page(self, name: str) -> str:
        """Return a static page as loaded at startup."""
        try:
            return self._pages[name]
        except KeyError as e:
            raise RenderError(f"Page {name} is not loaded") from e


def get_renderer(request: Request) -> TemplateRenderer:
    """Dependency for the shared renderer. Use with FastAPI's Depends()."""
    return request.app.state.renderer
