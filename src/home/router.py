from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from src.templating.dependencies import get_renderer
from src.templating.renderer import TemplateRenderer

HOME_TEMPLATE = "home.html"

router = APIRouter(tags=["Home"], default_response_class=HTMLResponse)


@router.get("/")
def home(
    request: Request, renderer: TemplateRenderer = Depends(get_renderer)
) -> HTMLResponse:
    return renderer.render(request, HOME_TEMPLATE)
