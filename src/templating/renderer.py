import logging
from pathlib import Path
from typing import Any
from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError, TemplateNotFound

from src.common.exceptions import TemplateRenderException

logger = logging.getLogger(__name__)


class TemplateRenderer:
    def __init__(self, directory: str | Path):
        self.directory = Path(directory)
        self.templates = Jinja2Templates(directory=self.directory)
        self.template_names = self._load_templates()

    def _load_templates(self) -> frozenset[str]:
        """Parse every template up front so a broken one fails at startup."""
        env = self.templates.env
        names = env.list_templates(extensions=["html"])
        if not names:
            raise RuntimeError(f"No templates found in {self.directory}")

        for name in names:
            env.get_template(name)

        logger.info(f"Loaded {len(names)} templates from {self.directory}")
        return frozenset(names)

    def render(
        self, request: Request, name: str, context: dict[str, Any] | None = None
    ) -> HTMLResponse:
        if name not in self.template_names:
            raise TemplateRenderException(name, f"template '{name}' not found")

        try:
            return self.templates.TemplateResponse(request, name, context or {})
        except TemplateNotFound as e:
            raise TemplateRenderException(name, f"template '{name}' not found") from e
        except TemplateError as e:
            raise TemplateRenderException(name, str(e)) from e
