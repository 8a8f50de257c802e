"""Authorization checks for projects, tasks and comments.

Policies are pure predicates over an actor and a resource together with
the resource's parents (task -> project, comment -> task -> project).
Callers check the parent before the child.
"""

from enum import Enum
from typing import Any

from src.taskboard.core.exceptions import ForbiddenError
from src.taskboard.core.logging import get_logger
from src.taskboard.models import User

logger = get_logger(__name__)


class Action(str, Enum):
    """Operation being authorized."""

    VIEW = "view"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class Policy:
    """Base policy. Every action is denied unless a subclass allows it."""

    def view(self, actor: User, resource: Any, *parents: Any) -> bool:
        return False

    def create(self, actor: User, *parents: Any) -> bool:
        return False

    def update(self, actor: User, resource: Any, *parents: Any) -> bool:
        return False

    def delete(self, actor: User, resource: Any, *parents: Any) -> bool:
        return False


_registry: dict[type, Policy] = {}


def register_policy(model: type, policy: Policy) -> None:
    """Associate a policy with a model class."""
    _registry[model] = policy


def policy_for(resource: Any) -> Policy:
    """Return the policy for a model instance or a model class."""
    model = resource if isinstance(resource, type) else type(resource)
    try:
        return _registry[model]
    except KeyError:
        raise LookupError(f"No policy registered for {model.__name__}") from None


def can(actor: User, action: Action, resource: Any, *parents: Any) -> bool:
    """Return True if actor may perform action on resource.

    For Action.CREATE pass the model class as resource and the would-be
    parents, e.g. can(user, Action.CREATE, Comment, task, project).
    """
    policy = policy_for(resource)
    if action is Action.CREATE:
        return policy.create(actor, *parents)
    check = getattr(policy, action.value)
    return bool(check(actor, resource, *parents))


def authorize(actor: User, action: Action, resource: Any, *parents: Any) -> None:
    """Raise ForbiddenError unless actor may perform action on resource."""
    if can(actor, action, resource, *parents):
        return

    is_class = isinstance(resource, type)
    model = resource if is_class else type(resource)
    logger.info(
        "Authorization denied",
        action=action.value,
        resource=model.__name__,
        resource_id=None if is_class else str(resource.id),
        actor_id=str(actor.id),
    )
    raise ForbiddenError()
