"""Email client using Resend API."""

import html
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError

import resend

from src.taskboard.core.config import get_settings
from src.taskboard.core.logging import get_logger

logger = get_logger(__name__)

# Thread pool for email sending with timeout support
_email_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="email_sender")

_BODY_STYLE = (
    "font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; "
    "line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;"
)
_BUTTON_STYLE = (
    "background-color: #2563eb; color: white; padding: 12px 24px; "
    "text-decoration: none; border-radius: 6px; display: inline-block; font-weight: 500;"
)
_MUTED_STYLE = "color: #666; font-size: 14px;"


def send_task_status_email(
    to: str,
    user_name: str,
    project_name: str,
    task_title: str,
    old_status: str,
    new_status: str,
    task_url: str,
) -> bool:
    """Tell a project owner that one of their tasks changed status.

    Args:
        to: Recipient email address
        user_name: Recipient's name for personalization
        project_name: Name of the task's project
        task_title: Title of the task
        old_status: Status before the update
        new_status: Status after the update
        task_url: Link to the task in the frontend

    Returns:
        True if email was sent (or logged in dev mode), False on error
    """
    settings = get_settings()

    if not settings.resend_api_key:
        # Dev mode: log instead of sending
        logger.warning(
            "RESEND_API_KEY not set - email not sent",
            to=to,
            email_type="task_status_changed",
        )
        return True

    resend.api_key = settings.resend_api_key

    def _send() -> None:
        resend.Emails.send(
            {
                "from": settings.email_from,
                "to": [to],
                "subject": f"Task status updated: {task_title}",
                "html": _get_task_status_email_html(
                    user_name, project_name, task_title, old_status, new_status, task_url
                ),
            }
        )

    try:
        future = _email_executor.submit(_send)
        future.result(timeout=settings.email_send_timeout_seconds)
        logger.info("Task status email sent", to=to)
        return True
    except FuturesTimeoutError:
        logger.error("Email send timed out", to=to, timeout=settings.email_send_timeout_seconds)
        return False
    except Exception as e:
        logger.error("Failed to send task status email", to=to, error=str(e))
        return False


def _get_task_status_email_html(
    user_name: str,
    project_name: str,
    task_title: str,
    old_status: str,
    new_status: str,
    task_url: str,
) -> str:
    """Generate HTML content for the task status email."""
    safe_user_name = html.escape(user_name)
    safe_project_name = html.escape(project_name)
    safe_task_title = html.escape(task_title)
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="{_BODY_STYLE}">
    <h1 style="color: #2563eb; margin-bottom: 24px;">Task status updated</h1>
    <p>Hi {safe_user_name},</p>
    <p>The task <strong>{safe_task_title}</strong> in <strong>{safe_project_name}</strong>
    moved from <strong>{html.escape(old_status)}</strong>
    to <strong>{html.escape(new_status)}</strong>.</p>
    <p style="margin: 32px 0;">
        <a href="{task_url}" style="{_BUTTON_STYLE}">View Task</a>
    </p>
    <p style="{_MUTED_STYLE} margin-top: 32px;">
        You are receiving this because you own the project.
    </p>
</body>
</html>"""
