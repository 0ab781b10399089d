"""
Task API routes for Tasknote
Handles task, category, filter and settings endpoints
"""
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, status, Query, Response
from typing import List, Optional, Set
from pydantic import BaseModel

from ...dependencies import get_task_service, get_theme_manager
from ...models.task import Task, TaskCreate, TaskUpdate, TaskPublic, Priority
from ...models.category import Category, CategoryCreate, CategoryUpdate, CategoryPublic
from ...services.filters import SortOption, TaskFilter
from ...services.reminder_service import ReminderService
from ...services.task_service import TaskService
from ...services.theme_service import AppTheme, ThemeManager
from ...utils.errors import TaskNotFoundException


router = APIRouter()


# ============ Request/Response schemas ============

class FilterRequest(BaseModel):
    """Request body for changing filters; omitted fields keep their value"""
    search_text: Optional[str] = None
    selected_categories: Optional[Set[str]] = None
    selected_priorities: Optional[Set[Priority]] = None
    show_completed: Optional[bool] = None
    sort_option: Optional[SortOption] = None


class ReorderRequest(BaseModel):
    """Request body for moving tasks within the current list"""
    from_positions: List[int]
    to_position: int


class ReminderResponse(BaseModel):
    task_id: int
    title: str
    body: str
    fire_at: datetime


class ThemeRequest(BaseModel):
    theme: AppTheme


class ThemeResponse(BaseModel):
    theme: AppTheme
    display_name: str
    color_scheme: Optional[str] = None


def _get_task_or_404(service: TaskService, task_id: int) -> Task:
    try:
        return service.get_task(task_id)
    except TaskNotFoundException:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Task with ID {task_id} not found"
        )


def _get_category_or_404(service: TaskService, category_id: int) -> Category:
    for category in service.categories:
        if category.id == category_id:
            return category
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Category with ID {category_id} not found"
    )


def _save_failed(action: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}"
    )


def _category_public(service: TaskService, category: Category) -> CategoryPublic:
    return CategoryPublic(
        id=category.id,
        name=category.name,
        color=category.color,
        created_at=category.created_at,
        task_count=service.category_task_count(category.name),
    )


# Filter endpoints

@router.get("/filters", response_model=TaskFilter)
async def get_filters(service: TaskService = Depends(get_task_service)):
    """Current filter and sort parameters."""
    return service.filter


@router.put("/filters", response_model=List[TaskPublic])
async def update_filters(request: FilterRequest, service: TaskService = Depends(get_task_service)):
    """
    Change filter and sort parameters.

    Returns:
        The task list under the new parameters
    """
    return service.update_filters(**request.model_dump(exclude_none=True))


@router.delete("/filters", response_model=List[TaskPublic])
async def clear_filters(service: TaskService = Depends(get_task_service)):
    """Reset every filter (the sort order is kept)."""
    return service.clear_filters()


# Task endpoints

@router.get("/tasks", response_model=List[TaskPublic])
async def list_tasks(service: TaskService = Depends(get_task_service)):
    """Tasks as filtered and sorted by the current parameters."""
    return service.filtered_tasks


@router.post("/tasks", response_model=TaskPublic, status_code=status.HTTP_201_CREATED)
async def create_task(request: TaskCreate, service: TaskService = Depends(get_task_service)):
    task = service.create_task(
        title=request.title,
        description=request.description,
        due_date=request.due_date,
        category=request.category,
        priority=request.priority,
    )
    if task is None:
        raise _save_failed("create task")
    return task


@router.get("/tasks/suggestions", response_model=List[str])
async def search_suggestions(
    q: str = Query("", description="Text to complete"),
    service: TaskService = Depends(get_task_service)
):
    return service.search_suggestions(q)


@router.post("/tasks/reorder", response_model=List[TaskPublic])
async def reorder_tasks(request: ReorderRequest, service: TaskService = Depends(get_task_service)):
    """Move tasks within the current list; positions refer to GET /tasks."""
    try:
        reordered = service.reorder_tasks(request.from_positions, request.to_position)
    except IndexError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if not reordered:
        raise _save_failed("reorder tasks")
    return service.filtered_tasks


@router.get("/tasks/{task_id}", response_model=TaskPublic)
async def get_task(task_id: int, service: TaskService = Depends(get_task_service)):
    return _get_task_or_404(service, task_id)


@router.patch("/tasks/{task_id}", response_model=TaskPublic)
async def update_task(task_id: int, request: TaskUpdate, service: TaskService = Depends(get_task_service)):
    """Partial update: only fields present in the body change."""
    task = _get_task_or_404(service, task_id)
    updated = service.update_task(task, **request.model_dump(exclude_unset=True))
    if updated is None:
        raise _save_failed("update task")
    return updated


@router.post("/tasks/{task_id}/toggle", response_model=TaskPublic)
async def toggle_task(task_id: int, service: TaskService = Depends(get_task_service)):
    task = _get_task_or_404(service, task_id)
    updated = service.toggle_task_completion(task)
    if updated is None:
        raise _save_failed("toggle task")
    return updated


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: int, service: TaskService = Depends(get_task_service)):
    task = _get_task_or_404(service, task_id)
    if not service.delete_task(task):
        raise _save_failed("delete task")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Category endpoints

@router.get("/categories", response_model=List[CategoryPublic])
async def list_categories(service: TaskService = Depends(get_task_service)):
    return [_category_public(service, category) for category in service.categories]


@router.post("/categories", response_model=CategoryPublic, status_code=status.HTTP_201_CREATED)
async def create_category(
    request: CategoryCreate,
    response: Response,
    service: TaskService = Depends(get_task_service)
):
    """
    Create a category.

    A name that already exists (in any case) is not an error: the existing
    category is returned with status 200.
    """
    category = service.create_category(request.name, color=request.color)
    if category is None:
        existing = [c for c in service.categories if c.name.lower() == request.name.lower()]
        if not existing:
            raise _save_failed("create category")
        response.status_code = status.HTTP_200_OK
        category = existing[0]
    return _category_public(service, category)


@router.patch("/categories/{category_id}", response_model=CategoryPublic)
async def update_category(
    category_id: int,
    request: CategoryUpdate,
    service: TaskService = Depends(get_task_service)
):
    """Rename or recolor a category. Tasks keep their current label."""
    category = _get_category_or_404(service, category_id)
    updated = service.update_category(category, name=request.name, color=request.color)
    if updated is None:
        raise _save_failed("update category")
    return _category_public(service, updated)


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: int, service: TaskService = Depends(get_task_service)):
    """Delete a category; its tasks move to Uncategorized."""
    category = _get_category_or_404(service, category_id)
    if not service.delete_category(category):
        raise _save_failed("delete category")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Reminder endpoints

@router.post("/reminders/due", response_model=List[ReminderResponse])
async def pop_due_reminders(service: TaskService = Depends(get_task_service)):
    """Return and clear every pending reminder that is due now."""
    if not isinstance(service.reminders, ReminderService):
        raise HTTPException(
            status_code=status.HTTP_501_NOT_IMPLEMENTED,
            detail="Reminders are delivered by an external scheduler"
        )
    return [
        ReminderResponse(task_id=r.task_id, title=r.title, body=r.body, fire_at=r.fire_at)
        for r in service.reminders.pop_due()
    ]


# Settings endpoints

@router.get("/settings/theme", response_model=ThemeResponse)
async def get_theme(themes: ThemeManager = Depends(get_theme_manager)):
    return _theme_response(themes.current_theme)


@router.put("/settings/theme", response_model=ThemeResponse)
async def set_theme(request: ThemeRequest, themes: ThemeManager = Depends(get_theme_manager)):
    return _theme_response(themes.set_theme(request.theme))


def _theme_response(theme: AppTheme) -> ThemeResponse:
    return ThemeResponse(theme=theme, display_name=theme.display_name, color_scheme=theme.color_scheme)


@router.post("/data/sample", status_code=status.HTTP_200_OK)
async def prefill_sample_data(service: TaskService = Depends(get_task_service)):
    """Seed sample categories and tasks if there are no tasks yet."""
    return {"created": service.prefill_sample_data()}


@router.delete("/data", status_code=status.HTTP_204_NO_CONTENT)
async def delete_all_data(service: TaskService = Depends(get_task_service)):
    """Delete every task and category and cancel all reminders."""
    if not service.delete_all_data():
        raise _save_failed("delete all data")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
