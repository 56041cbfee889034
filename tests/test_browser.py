"""Tests for starting the browser"""

from unittest.mock import MagicMock, patch

import pytest

from epinio_ui import browser, config


def test_chrome_bin_from_env(tmp_path, monkeypatch):
    """It should prefer CHROME_BIN when it exists"""
    chrome = tmp_path / "chrome"
    chrome.write_text("")
    monkeypatch.setenv("CHROME_BIN", str(chrome))
    assert browser.detect_chrome_binary() == str(chrome)


def test_chromedriver_from_env(tmp_path, monkeypatch):
    """It should prefer CHROMEDRIVER when it exists"""
    driver = tmp_path / "chromedriver"
    driver.write_text("")
    monkeypatch.setenv("CHROMEDRIVER", str(driver))
    assert browser.detect_chromedriver() == str(driver)


def test_chrome_options():
    """It should run headless without the sandbox"""
    args = browser.chrome_options(headless=True).arguments
    assert "--headless=new" in args
    assert "--no-sandbox" in args
    assert "--headless=new" not in browser.chrome_options(headless=False).arguments


@pytest.mark.parametrize("driver_path", ["/usr/bin/chromedriver", None])
def test_start_browser(driver_path, monkeypatch):
    """It should start Chrome with the local driver or Selenium Manager"""
    monkeypatch.delenv("USE_WDM", raising=False)
    with patch.object(browser, "detect_chromedriver", return_value=driver_path), patch.object(
        browser, "ChromeService"
    ) as service, patch.object(browser.webdriver, "Chrome") as chrome:
        started = browser.start_browser(headless=True)
    assert started is chrome.return_value
    started.set_window_size.assert_called_once_with(*config.WINDOW_SIZE)
    assert service.called == bool(driver_path)


def test_start_browser_failure(monkeypatch):
    """It should explain how to install a browser"""
    monkeypatch.delenv("USE_WDM", raising=False)
    with patch.object(browser, "detect_chromedriver", return_value=None), patch.object(
        browser.webdriver, "Chrome", MagicMock(side_effect=OSError("no chrome"))
    ):
        with pytest.raises(RuntimeError) as err:
            browser.start_browser()
    assert "CHROME_BIN" in str(err.value)
    assert "OSError: no chrome" in str(err.value)
