"""Notification utilities - email."""

from src.taskboard.core.notifications.email import send_task_status_email

__all__ = [
    "send_task_status_email",
]
