"""Cache dependencies."""

from typing import Annotated

from fastapi import Depends

from src.taskboard.core.cache import TaskListCache, get_task_list_cache

TaskListCacheDep = Annotated[TaskListCache, Depends(get_task_list_cache)]
