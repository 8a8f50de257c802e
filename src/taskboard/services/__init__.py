from src.taskboard.services.comment_service import CommentService
from src.taskboard.services.notification_service import NotificationService
from src.taskboard.services.project_service import ProjectService
from src.taskboard.services.task_service import TaskService
from src.taskboard.services.user_service import UserService

__all__ = [
    "CommentService",
    "NotificationService",
    "ProjectService",
    "TaskService",
    "UserService",
]
