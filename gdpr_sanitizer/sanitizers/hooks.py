"""Extension hooks fired around each record update."""

import importlib
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from gdpr_sanitizer.models import CommentRecord, CommentUpdate, UserRecord, UserReplacement
from gdpr_sanitizer.sanitizers.provider import SyntheticValueProvider
from gdpr_sanitizer.utils import get_logger

logger = get_logger(__name__)

UserHook = Callable[[UserRecord, UserReplacement, SyntheticValueProvider], None]
CommentHook = Callable[[CommentRecord, CommentUpdate, SyntheticValueProvider], None]


class HookPoint(str, Enum):
    """Points in a record update where callbacks run."""

    PRE_UPDATE_USER = "pre_update_user"
    POST_UPDATE_USER = "post_update_user"
    PRE_UPDATE_COMMENT = "pre_update_comment"
    POST_UPDATE_COMMENT = "post_update_comment"


class SanitizerHooks:
    """
    Callback lists for the four hook points.

    Pre-update callbacks receive the original record, the replacement that is
    about to be written and the value provider. They may change the
    replacement in place, including adding entries to its ``meta`` mapping to
    overwrite custom fields. Post-update callbacks receive the same arguments
    after the write.

    Callbacks run in registration order. An exception raised by a callback
    propagates and stops the run.
    """

    def __init__(
        self,
        pre_update_user: Iterable[UserHook] = (),
        post_update_user: Iterable[UserHook] = (),
        pre_update_comment: Iterable[CommentHook] = (),
        post_update_comment: Iterable[CommentHook] = (),
    ):
        self._callbacks: Dict[HookPoint, List[Callable]] = {
            HookPoint.PRE_UPDATE_USER: list(pre_update_user),
            HookPoint.POST_UPDATE_USER: list(post_update_user),
            HookPoint.PRE_UPDATE_COMMENT: list(pre_update_comment),
            HookPoint.POST_UPDATE_COMMENT: list(post_update_comment),
        }

    def register(self, point: HookPoint, callback: Callable) -> None:
        """
        Add a callback to a hook point.

        Args:
            point: Hook point to attach to
            callback: Callable taking (original, replacement, provider)
        """
        self._callbacks[HookPoint(point)].append(callback)
        logger.debug(f"Registered {getattr(callback, '__name__', callback)!s} on {point}")

    def callbacks(self, point: HookPoint) -> List[Callable]:
        """Registered callbacks of a hook point, in order."""
        return list(self._callbacks[HookPoint(point)])

    def fire_user(
        self,
        point: HookPoint,
        original: UserRecord,
        replacement: UserReplacement,
        provider: SyntheticValueProvider,
    ) -> None:
        for callback in self._callbacks[point]:
            callback(original, replacement, provider)

    def fire_comment(
        self,
        point: HookPoint,
        original: CommentRecord,
        update: CommentUpdate,
        provider: SyntheticValueProvider,
    ) -> None:
        for callback in self._callbacks[point]:
            callback(original, update, provider)


def load_hook_module(module_path: str, hooks: Optional[SanitizerHooks] = None) -> SanitizerHooks:
    """
    Import a module and let it register its callbacks.

    The module must define ``register_hooks(hooks)``.

    Args:
        module_path: Dotted module path
        hooks: Registry to add to (a new one if None)

    Returns:
        The registry

    Raises:
        ImportError: If the module cannot be imported
        AttributeError: If the module has no register_hooks function
    """
    hooks = hooks if hooks is not None else SanitizerHooks()
    module = importlib.import_module(module_path)

    register = getattr(module, "register_hooks", None)
    if not callable(register):
        raise AttributeError(f"Hook module {module_path} does not define register_hooks(hooks)")

    register(hooks)
    logger.info(f"Loaded hooks from {module_path}")
    return hooks
