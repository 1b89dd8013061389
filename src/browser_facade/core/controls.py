import logging
from typing import TYPE_CHECKING, Optional, Union

from ..data_models import Hook, Locator, Strategy

if TYPE_CHECKING:
    from .browser_interface import BrowserInterface

logger = logging.getLogger(__name__)


def make_hook(strategy: Union[Hook, Strategy, str], hook_string: Optional[str] = None) -> Hook:
    """Accepts either a ready Hook or a strategy plus hook string."""
    if isinstance(strategy, Hook):
        if hook_string is not None:
            raise TypeError("hook_string must not be given together with a Hook")
        return strategy
    if hook_string is None:
        raise TypeError("hook_string is required when a strategy is given")
    return Hook(strategy=Strategy(strategy), hook_string=hook_string)


class Control:
    """A page element bound to the interface that owns its session."""

    def __init__(self, interface: "BrowserInterface", hook: Hook):
        self.interface = interface
        self.hook = hook

    @property
    def locator(self) -> Locator:
        return self.hook.locator

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hook})"


class SelectControl(Control):
    """A <select> element bound to the interface that owns its session."""
