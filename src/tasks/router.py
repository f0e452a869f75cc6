from fastapi import APIRouter, Depends, Form, Path, Request
from fastapi.responses import HTMLResponse

from src.tasks.dependencies import get_task_service
from src.tasks.schemas import parse_done
from src.tasks.service import TaskService
from src.templating.dependencies import get_renderer
from src.templating.renderer import TemplateRenderer

TODO_LIST_TEMPLATE = "todo_list.html"
ADD_TASK_FORM_TEMPLATE = "add_task_form.html"
UPDATE_TASK_FORM_TEMPLATE = "update_task_form.html"

# Largest value a signed 64-bit integer column can hold.
MAX_TASK_ID = 2**63 - 1


router = APIRouter(
    prefix="/tasks",
    tags=["Tasks"],
    default_response_class=HTMLResponse,
)

forms_router = APIRouter(
    tags=["Forms"],
    default_response_class=HTMLResponse,
)


def render_task_list(
    request: Request, task_service: TaskService, renderer: TemplateRenderer
) -> HTMLResponse:
    return renderer.render(
        request, TODO_LIST_TEMPLATE, {"tasks": task_service.list_tasks()}
    )


@router.get("")
def list_tasks(
    request: Request,
    task_service: TaskService = Depends(get_task_service),
    renderer: TemplateRenderer = Depends(get_renderer),
) -> HTMLResponse:
    return render_task_list(request, task_service, renderer)


@router.post("")
def add_task(
    request: Request,
    task: str = Form(""),
    task_service: TaskService = Depends(get_task_service),
    renderer: TemplateRenderer = Depends(get_renderer),
) -> HTMLResponse:
    task_service.add_task(task)
    return render_task_list(request, task_service, renderer)


@router.api_route("/{task_id}", methods=["PUT", "POST"])
def update_task(
    request: Request,
    task_id: int = Path(ge=0, le=MAX_TASK_ID),
    task: str = Form(""),
    done: str | None = Form(None),
    task_service: TaskService = Depends(get_task_service),
    renderer: TemplateRenderer = Depends(get_renderer),
) -> HTMLResponse:
    task_service.update_task(task_id, task, parse_done(done))
    return render_task_list(request, task_service, renderer)


@router.delete("/{task_id}")
def delete_task(
    request: Request,
    task_id: int = Path(ge=0, le=MAX_TASK_ID),
    task_service: TaskService = Depends(get_task_service),
    renderer: TemplateRenderer = Depends(get_renderer),
) -> HTMLResponse:
    task_service.delete_task(task_id)
    return render_task_list(request, task_service, renderer)


@forms_router.get("/newTaskForm")
def get_task_form(
    request: Request,
    renderer: TemplateRenderer = Depends(get_renderer),
) -> HTMLResponse:
    return renderer.render(request, ADD_TASK_FORM_TEMPLATE)


@forms_router.get("/taskUpdateForm/{task_id}")
def get_task_update_form(
    request: Request,
    task_id: int = Path(ge=0, le=MAX_TASK_ID),
    task_service: TaskService = Depends(get_task_service),
    renderer: TemplateRenderer = Depends(get_renderer),
) -> HTMLResponse:
    task = task_service.get_task(task_id)
    return renderer.render(request, UPDATE_TASK_FORM_TEMPLATE, {"task": task})
