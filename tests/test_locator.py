"""Tests for ElementLocator and ElementHandle"""

import pytest
from selenium.common.exceptions import StaleElementReferenceException
from selenium.webdriver.common.by import By

from epinio_ui.common.errors import AssertionFailed, ElementNotFound
from epinio_ui.pages.locator import SELECTORS, ElementLocator, text_xpath, xpath_literal
from tests.conftest import make_element


def by_selector(mapping):
    """find_elements side effect returning elements per selector value"""
    return lambda _by, value: mapping.get(value, [])


######################################################################
#  Q U E R I E S
######################################################################


def test_query_known_name(locator):
    """It should resolve a semantic name to its selector"""
    assert locator.query("confirm input") == (By.CSS_SELECTOR, "#confirm")


def test_query_with_parameters(locator):
    """It should format parameterised selectors"""
    _, value = locator.query("pipeline step badge", index=3)
    assert value == ":nth-child(3) > .col-badge-state-formatter > .badge-state"


def test_query_unknown_name(locator):
    """It should reject names missing from the selector map"""
    with pytest.raises(ValueError):
        locator.query("no such thing")
    with pytest.raises(ValueError):
        locator.handle("no such thing")


def test_custom_selectors(driver):
    """It should accept an alternative selector map"""
    locator = ElementLocator(driver, selectors={"title": (By.ID, "title")}, timeout=0)
    assert locator.query("title") == (By.ID, "title")


def test_selector_contract():
    """It should keep the class names the console renders"""
    values = [value for _, value in SELECTORS.values()]
    for expected in (".m-0", ".card-actions .role-primary", ".controls-row", ".primaryheader", ".numbers", "#confirm"):
        assert expected in values


def test_xpath_literal_quotes():
    """It should quote text containing either kind of quote"""
    assert xpath_literal("plain") == "'plain'"
    assert xpath_literal("it's") == '"it\'s"'
    assert xpath_literal("""a'b"c""") == """concat('a', "'", 'b"c')"""
    assert "[text()[contains(normalize-space(.), 'Create')]]" in text_xpath("Create", "button")


######################################################################
#  L O O K U P S
######################################################################


def test_exists(driver, locator):
    """It should check for presence without waiting"""
    assert not locator.exists("app header")
    driver.find_elements.return_value = [make_element()]
    assert locator.exists("app header")


def test_find_raises_when_missing(locator):
    """It should raise ElementNotFound with the selector"""
    with pytest.raises(ElementNotFound) as err:
        locator.find("app header")
    assert err.value.selector == ".primaryheader"
    assert "not found" in str(err.value)


def test_wait_visible_skips_hidden(driver, locator):
    """It should return the first displayed element"""
    hidden = make_element(displayed=False)
    shown = make_element()
    driver.find_elements.return_value = [hidden, shown]
    assert locator.wait_visible("primary action") is shown


def test_wait_visible_all_hidden(driver, locator):
    """It should fail when nothing is displayed"""
    driver.find_elements.return_value = [make_element(displayed=False)]
    with pytest.raises(ElementNotFound):
        locator.wait_visible("primary action")


def test_assert_contains(driver, locator):
    """It should return the element once its text matches"""
    header = make_element("testapp Running")
    driver.find_elements.side_effect = by_selector({".primaryheader": [header]})
    assert locator.assert_contains("app header", "Running") is header


def test_assert_contains_mismatch(driver, locator):
    """It should raise AssertionFailed naming the text it saw"""
    driver.find_elements.side_effect = by_selector({".numbers": [make_element("50%")]})
    with pytest.raises(AssertionFailed) as err:
        locator.assert_contains("readiness", "100%")
    assert "found '50%'" in str(err.value)
    assert isinstance(err.value, AssertionError)


def test_assert_contains_missing(locator):
    """It should raise ElementNotFound when the element never renders"""
    with pytest.raises(ElementNotFound):
        locator.assert_contains("readiness", "100%")


######################################################################
#  T E X T   L O O K U P S
######################################################################


def test_contains_on_page(driver, locator):
    """It should search the whole page by text"""
    link = make_element("mynamespace")
    driver.find_elements.side_effect = lambda by, value: [link] if by == By.XPATH else []
    assert locator.contains("mynamespace") is link
    assert locator.text_visible("mynamespace")


def test_contains_within_container(driver, locator):
    """It should only search inside the named container"""
    button = make_element("Create")
    row = make_element()
    row.find_elements.return_value = [button]
    driver.find_elements.side_effect = by_selector({".controls-row": [row]})
    assert locator.contains("Create", within="controls row", tag="button") is button
    by, xpath = row.find_elements.call_args[0]
    assert by == By.XPATH
    assert xpath.startswith(".//button")


def test_contains_missing(locator):
    """It should raise ElementNotFound naming the text and container"""
    with pytest.raises(ElementNotFound) as err:
        locator.contains("Create", within="controls row")
    assert "text 'Create' within 'controls row'" in str(err.value)
    assert not locator.text_visible("Create")


def test_wait_absent(driver, locator):
    """It should pass once the text is gone and fail while it stays"""
    locator.wait_absent("mynamespace")
    driver.find_elements.side_effect = lambda by, value: [make_element("mynamespace")] if by == By.XPATH else []
    with pytest.raises(AssertionFailed) as err:
        locator.wait_absent("mynamespace")
    assert "still shown" in str(err.value)


######################################################################
#  H A N D L E S
######################################################################


def test_handle_should_exist(driver, locator):
    """It should turn a missing element into an assertion failure"""
    icon = locator.handle("epinio icon")
    assert repr(icon) == "<ElementHandle 'epinio icon'>"
    assert not icon.exists()
    with pytest.raises(AssertionFailed):
        icon.should_exist()
    element = make_element()
    driver.find_elements.return_value = [element]
    assert icon.should_exist() is element
    assert icon.wait_visible() is element


def test_handle_keeps_parameters(driver, locator):
    """It should pass its parameters on every lookup"""
    badge = make_element("Success")
    driver.find_elements.side_effect = by_selector(
        {":nth-child(2) > .col-badge-state-formatter > .badge-state": [badge]}
    )
    handle = locator.handle("pipeline step badge", index=2)
    assert handle.get() is badge
    assert handle.should_contain("Success") is badge
    assert not locator.handle("pipeline step badge", index=1).exists()


######################################################################
#  M U L T I P L E   M A T C H E S   A N D   R E - R E N D E R S
######################################################################


def test_assert_contains_any_match(driver, locator):
    """It should pass when a later element of the matched set holds the text"""
    title = make_element("Namespaces")
    driver.find_elements.side_effect = by_selector({".m-0": [make_element("Cluster Tools"), title]})
    assert locator.assert_contains("page title", "Namespaces") is title


def test_assert_contains_reports_every_text(driver, locator):
    """It should list all texts it saw when none matches"""
    driver.find_elements.side_effect = by_selector({".numbers": [make_element("2 Instances"), make_element("50%")]})
    with pytest.raises(AssertionFailed) as err:
        locator.assert_contains("readiness", "100%")
    assert "found '2 Instances', '50%'" in str(err.value)


def test_text_visible_survives_stale_element(driver, locator):
    """It should treat an element gone stale during the check as not shown"""
    stale = make_element("mynamespace")
    stale.is_displayed.side_effect = StaleElementReferenceException("re-rendered")
    driver.find_elements.side_effect = lambda by, value: [stale] if by == By.XPATH else []
    assert not locator.text_visible("mynamespace")
    locator.wait_absent("mynamespace")


def test_element_not_found_elapsed_defaults_to_timeout():
    """It should report the timeout as elapsed when none is given"""
    err = ElementNotFound("#confirm", 4)
    assert err.elapsed == 4
    assert ElementNotFound("#confirm", 4, 1.5).elapsed == 1.5
