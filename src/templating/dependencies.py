from fastapi import Request

from src.templating.renderer import TemplateRenderer


def get_renderer(request: Request) -> TemplateRenderer:
    return request.app.state.renderer
