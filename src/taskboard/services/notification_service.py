"""Task status change notifications."""

from fastapi import BackgroundTasks

from src.taskboard.core.config import get_settings
from src.taskboard.core.logging import get_logger
from src.taskboard.core.notifications import send_task_status_email
from src.taskboard.models import Project, Task
from src.taskboard.repositories import UserRepository

logger = get_logger(__name__)


def deliver_task_status_email(
    to: str,
    user_name: str,
    project_name: str,
    task_title: str,
    old_status: str,
    new_status: str,
    task_url: str,
) -> None:
    """Send the email and log the outcome. Never raises."""
    try:
        sent = send_task_status_email(
            to, user_name, project_name, task_title, old_status, new_status, task_url
        )
    except Exception as e:
        logger.error("Task status notification failed", to=to, error=str(e))
        return
    if not sent:
        logger.warning("Task status notification not delivered", to=to)


class NotificationService:
    """Schedules notifications to project owners."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def notify_task_status_changed(
        self,
        background_tasks: BackgroundTasks,
        project: Project,
        task: Task,
        old_status: str,
        new_status: str,
    ) -> bool:
        """Queue an email to the project owner about a status change.

        Returns:
            True if a notification was scheduled.
        """
        if old_status == new_status:
            return False

        owner = await self.user_repo.get_by_id(project.owner_id)
        if owner is None or not owner.is_active:
            logger.warning(
                "Skipping task status notification, owner unavailable",
                project_id=str(project.id),
            )
            return False

        settings = get_settings()
        task_url = f"{settings.app_url}/projects/{project.id}/tasks/{task.id}"
        background_tasks.add_task(
            deliver_task_status_email,
            owner.email,
            owner.full_name,
            project.name,
            task.title,
            old_status,
            new_status,
            task_url,
        )
        logger.info(
            "Task status notification scheduled",
            task_id=str(task.id),
            old_status=old_status,
            new_status=new_status,
        )
        return True
