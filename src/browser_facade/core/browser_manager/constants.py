from pathlib import Path

# Reuse the single source of truth for project root from core.config_loader
from ..config_loader import PROJECT_ROOT as CONFIG_PROJECT_ROOT

# Project root (repo root), consistent with ConfigLoader
PROJECT_ROOT: Path = CONFIG_PROJECT_ROOT
DEFAULT_WDM_CACHE_PATH: Path = PROJECT_ROOT / ".wdm_cache"

# Relative to the working directory the session is started from
DEFAULT_CHROME_DRIVER_LOG = Path("log") / "chromedriver.log"


def default_chrome_driver_log_path() -> Path:
    return Path.cwd() / DEFAULT_CHROME_DRIVER_LOG
