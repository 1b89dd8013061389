import argparse
import logging
import os
import sys
from typing import List, Optional

from pydantic import ValidationError
from selenium.common.exceptions import WebDriverException

from .core.browser_interface import BrowserInterface
from .core.config_loader import ConfigLoader, DEFAULT_SETTINGS_FILE, HEADLESS_ENV
from .core.errors import BrowserFacadeError
from .data_models import BrowserType, ByIndex, ByTitle, ByUrl, FocusTarget
from .utils.logger import setup_logger

logger = logging.getLogger(__name__)


def non_negative_int(value: str) -> int:
    index = int(value)
    if index < 0:
        raise argparse.ArgumentTypeError(f"window index must be non-negative, got {index}")
    return index


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="browser-facade",
        description="Open a browser session, navigate, optionally focus a window, then stop.",
    )
    parser.add_argument("--browser", default=BrowserType.CHROME.value,
                        help="Browser type: firefox, chrome, ie or safari (default: chrome).")
    parser.add_argument("--url", required=True, help="URL to navigate to.")
    parser.add_argument("--settings", default=str(DEFAULT_SETTINGS_FILE), help="Path to settings.json.")
    parser.add_argument("--headless", action="store_true", help="Run without resizing to the screen.")
    focus = parser.add_mutually_exclusive_group()
    focus.add_argument("--focus-index", type=non_negative_int, help="Focus the window with this index after navigating.")
    focus.add_argument("--focus-title", help="Focus the window with exactly this title.")
    focus.add_argument("--focus-url", help="Focus the window with exactly this URL.")
    return parser


def focus_target_from_args(args: argparse.Namespace) -> Optional[FocusTarget]:
    if args.focus_index is not None:
        return ByIndex(index=args.focus_index)
    if args.focus_title is not None:
        return ByTitle(title=args.focus_title)
    if args.focus_url is not None:
        return ByUrl(url=args.focus_url)
    return None


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.headless:
        os.environ[HEADLESS_ENV] = "1"

    config_loader = ConfigLoader(args.settings)
    setup_logger(config_loader)

    try:
        with BrowserInterface(args.browser, config_loader=config_loader) as browser:
            browser.go(args.url)
            target = focus_target_from_args(args)
            if target is not None:
                browser.focus(target)
            print(f"{browser.driver.title}\t{browser.driver.current_url}")
    except (BrowserFacadeError, WebDriverException, ValidationError, OSError) as e:
        # OSError covers driver download and connection failures from webdriver_manager
        logger.error(f"Browser session failed: {e}")
        return 1
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
