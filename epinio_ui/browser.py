"""Headless Chrome/Chromium for the UI scenarios.

Robust in DevContainers on Debian/Ubuntu. Priority of driver resolution:
  1) Local chromedriver from system packages (chromium-driver)
  2) Selenium Manager (Selenium 4.10+)
  3) webdriver-manager (when USE_WDM=1)

Browser binary detection honors CHROME_BIN and common Linux paths.
"""

from __future__ import annotations

import logging
import os
import shutil
from typing import Optional

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService

from epinio_ui import config

logger = logging.getLogger("epinio_ui")

CHROME_CANDIDATES = ("/usr/bin/chromium", "/usr/bin/chromium-browser", "/usr/bin/google-chrome")
CHROME_NAMES = ("chromium", "chromium-browser", "google-chrome", "chrome")
DRIVER_CANDIDATES = ("/usr/bin/chromedriver", "/usr/lib/chromium/chromedriver")


def use_wdm() -> bool:
    return os.getenv("USE_WDM") == "1"


def detect_chrome_binary() -> Optional[str]:
    """Return a likely Chrome/Chromium binary path or None."""
    env_bin = os.getenv("CHROME_BIN")
    if env_bin and os.path.exists(env_bin):
        return env_bin
    for cand in CHROME_CANDIDATES:
        if os.path.exists(cand):
            return cand
    for name in CHROME_NAMES:
        path = shutil.which(name)
        if path:
            return path
    return None


def detect_chromedriver() -> Optional[str]:
    """Return a likely chromedriver path from system packages or PATH."""
    env_drv = os.getenv("CHROMEDRIVER")
    if env_drv and os.path.exists(env_drv):
        return env_drv
    for cand in DRIVER_CANDIDATES:
        if os.path.exists(cand):
            return cand
    return shutil.which("chromedriver")


def chrome_options(headless: bool = True) -> ChromeOptions:
    options = ChromeOptions()
    if headless:
        options.add_argument("--headless=new")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    # local consoles run with self-signed certificates
    options.add_argument("--ignore-certificate-errors")
    chrome_bin = detect_chrome_binary()
    if chrome_bin:
        options.binary_location = chrome_bin
    return options


def start_browser(headless: bool = config.HEADLESS):
    """Start Chrome and return the WebDriver, with install hints on failure."""
    options = chrome_options(headless)
    driver_path = detect_chromedriver()
    try:
        if driver_path:
            logger.info("Using chromedriver at %s", driver_path)
            browser = webdriver.Chrome(service=ChromeService(executable_path=driver_path), options=options)
        elif not use_wdm():
            logger.info("Resolving chromedriver with Selenium Manager")
            browser = webdriver.Chrome(options=options)
        else:
            from webdriver_manager.chrome import ChromeDriverManager  # pylint: disable=import-outside-toplevel

            logger.info("Resolving chromedriver with webdriver-manager")
            browser = webdriver.Chrome(service=ChromeService(ChromeDriverManager().install()), options=options)
        browser.set_window_size(*config.WINDOW_SIZE)
    except Exception as exc:  # pragma: no cover  (helpful runtime messaging)
        tips = [
            "Cannot start Chrome/Chromium in headless mode. Common fixes:",
            "  1) Install OS packages (recommended in DevContainers):",
            "       sudo apt-get update && sudo apt-get install -y chromium chromium-driver fonts-liberation",
            "  2) If Chromium is at a non-standard path, set:",
            "       export CHROME_BIN=/usr/bin/chromium",
            "     If chromedriver is at a non-standard path, set:",
            "       export CHROMEDRIVER=/usr/bin/chromedriver",
            "  3) If corporate network blocks Selenium Manager downloads, try:",
            "       USE_WDM=1 behave",
            "",
            f"Original error: {type(exc).__name__}: {exc}",
        ]
        raise RuntimeError("\n".join(tips)) from exc
    return browser
