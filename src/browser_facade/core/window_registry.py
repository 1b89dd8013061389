import logging
from typing import Callable, Dict, List, Optional

from selenium.common.exceptions import NoSuchWindowException
from selenium.webdriver.remote.webdriver import WebDriver

from .errors import WindowNotFoundError

logger = logging.getLogger(__name__)


class WindowRegistry:
    """
    Index-addressable view over a driver's window handles.

    The driver reports open windows as an unordered set of opaque handles.
    `focus_by_index` gives every handle it has not seen before the next free
    index and never reassigns or forgets an index, so index K keeps naming the
    same handle for the life of the registry, even after that window closes.
    When several new handles show up in one call they are numbered in the
    driver's iteration order, which is not guaranteed to be stable.

    Title and URL focus scan the live windows and leave the index table alone.
    """

    def __init__(self, driver: WebDriver):
        self.driver = driver
        self._handles: Dict[int, str] = {}
        self._next_index = 0

    @property
    def handles(self) -> Dict[int, str]:
        """Copy of the index -> handle table."""
        return dict(self._handles)

    def handle_for(self, index: int) -> Optional[str]:
        return self._handles.get(index)

    def discover(self) -> List[int]:
        """Assigns indexes to handles not seen before; returns the new indexes."""
        known = set(self._handles.values())
        assigned: List[int] = []
        for handle in list(self.driver.window_handles):
            if handle in known:
                continue
            self._handles[self._next_index] = handle
            known.add(handle)
            assigned.append(self._next_index)
            logger.debug(f"Assigned window index {self._next_index} to handle {handle}")
            self._next_index += 1
        return assigned

    def focus_by_index(self, index: int) -> str:
        if index < 0:
            raise ValueError(f"Window index must be non-negative, got {index}")
        self.discover()
        handle = self._handles.get(index)
        if handle is None:
            raise WindowNotFoundError(f"No window has been assigned index {index}")
        # A closed window raises NoSuchWindowException from the driver
        self.driver.switch_to.window(handle)
        return handle

    def focus_by_title(self, title: str) -> str:
        return self._focus_matching("title", title, lambda: self.driver.title)

    def focus_by_url(self, url: str) -> str:
        return self._focus_matching("url", url, lambda: self.driver.current_url)

    def _focus_matching(self, attribute: str, expected: str, read_attribute: Callable[[], str]) -> str:
        """Switches through a snapshot of the open windows until one matches exactly."""
        try:
            origin: Optional[str] = self.driver.current_window_handle
        except NoSuchWindowException:
            origin = None

        snapshot = tuple(self.driver.window_handles)
        for handle in snapshot:
            self.driver.switch_to.window(handle)
            if read_attribute() == expected:
                logger.debug(f"Window {handle} matched {attribute} {expected!r}")
                return handle

        if origin is not None and origin in snapshot:
            self.driver.switch_to.window(origin)
        raise WindowNotFoundError(f"No open window has {attribute} {expected!r}")
