"""
Page-level steps of the symbol check: open Google Finance, confirm the title,
wait for the "You may be interested in" block and read the tickers out of it.

Selenium's own exceptions are turned into the errors below so callers can tell
the failure kinds apart without importing selenium.
"""
from selenium.common.exceptions import StaleElementReferenceException, TimeoutException
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC

from symbol_config import EXPECTED_TITLE, FINANCE_URL, SECTION_XPATH, SYMBOL_XPATH


class SymbolCheckError(Exception):
    """Base for every failure the check can report."""


class TitleMismatch(SymbolCheckError, AssertionError):
    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Page title mismatch! Expected it to contain {expected!r}, got {actual!r}")


class SectionTimeout(SymbolCheckError):
    pass


class StaleSymbols(SymbolCheckError):
    pass


# NAVIGATION
def open_page(driver, url=FINANCE_URL):
    driver.get(url)


def verify_title(driver, expected=EXPECTED_TITLE):
    title = driver.title or ""
    if expected not in title:
        raise TitleMismatch(expected, title)
    return title


# EXTRACTION
def wait_for_section(wait, locator=SECTION_XPATH):
    """Block until the section heading is visible or the wait runs out."""
    try:
        return wait.until(EC.visibility_of_element_located((By.XPATH, locator)))
    except TimeoutException as e:
        raise SectionTimeout(
            f"Timeout waiting for 'You may be interested in' section: {e.msg or e}"
        ) from e


def clean_symbols(texts):
    """Trim each text and drop the empty ones, keeping page order."""
    symbols = []
    for text in texts:
        symbol = (text or "").strip()
        if symbol:
            symbols.append(symbol)
    return symbols


def collect_symbols(driver, item_locator=SYMBOL_XPATH):
    try:
        elements = driver.find_elements(By.XPATH, item_locator)
        return clean_symbols(el.text for el in elements)
    except StaleElementReferenceException as e:
        raise StaleSymbols(
            f"DOM changed during symbol extraction: {e.msg or e}"
        ) from e
