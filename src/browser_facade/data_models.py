from enum import Enum
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator
from selenium.webdriver.common.by import By


class BrowserType(str, Enum):
    FIREFOX = "firefox"
    CHROME = "chrome"
    IE = "ie"
    SAFARI = "safari"

    @classmethod
    def parse(cls, value: Union[str, "BrowserType"]) -> "BrowserType":
        """Case-insensitive lookup by value or member name."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unknown browser type: {value!r}")


class Strategy(str, Enum):
    CSS = "css"
    XPATH = "xpath"
    ID = "id"
    NAME = "name"
    LINK_TEXT = "link_text"
    PARTIAL_LINK_TEXT = "partial_link_text"
    TAG_NAME = "tag_name"
    CLASS_NAME = "class_name"


STRATEGY_TO_BY = {
    Strategy.CSS: By.CSS_SELECTOR,
    Strategy.XPATH: By.XPATH,
    Strategy.ID: By.ID,
    Strategy.NAME: By.NAME,
    Strategy.LINK_TEXT: By.LINK_TEXT,
    Strategy.PARTIAL_LINK_TEXT: By.PARTIAL_LINK_TEXT,
    Strategy.TAG_NAME: By.TAG_NAME,
    Strategy.CLASS_NAME: By.CLASS_NAME,
}

Locator = Tuple[str, str]


class Hook(BaseModel):
    strategy: Strategy
    hook_string: str = Field(..., min_length=1, description="Selector text interpreted by the strategy.")

    @property
    def locator(self) -> Locator:
        """Selenium (By, value) pair for this hook."""
        return STRATEGY_TO_BY[self.strategy], self.hook_string

    def __str__(self) -> str:
        return f"{self.strategy.value}={self.hook_string}"


# Focus targets accepted by BrowserInterface.focus()

class ByIndex(BaseModel):
    index: int = Field(..., ge=0)


class ByTitle(BaseModel):
    title: str


class ByUrl(BaseModel):
    url: str


FocusTarget = Union[ByIndex, ByTitle, ByUrl]


class SessionSettings(BaseModel):
    """Settings the driver bootstrap reads, after cascading resolution."""
    implicit_wait: float = Field(..., ge=0, description="Implicit wait in seconds (perf.implicit_wait).")
    headless: bool = False
    firefox_profile: Optional[str] = Field(None, description="Firefox profile directory.")
    firefox_binary: Optional[str] = Field(None, description="Firefox executable path.")
    gecko_driver_path: Optional[str] = None
    chrome_driver_log_path: Optional[str] = None
    chrome_driver_path: Optional[str] = None
    driver_options: List[str] = Field(default_factory=list, description="Extra command-line arguments for the browser.")

    @field_validator('firefox_profile', 'firefox_binary', 'gecko_driver_path',
                     'chrome_driver_log_path', 'chrome_driver_path', mode='before')
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator('driver_options', mode='before')
    @classmethod
    def _split_driver_options(cls, value):
        # Environment overrides arrive as a single whitespace-separated string
        if value is None:
            return []
        if isinstance(value, str):
            return value.split()
        return value
