from contextlib import contextmanager

from selenium import webdriver
from selenium.webdriver.chrome.service import Service
from selenium.webdriver.support.ui import WebDriverWait
from webdriver_manager.chrome import ChromeDriverManager

from symbol_config import HEADLESS, WAIT_TIMEOUT


def build_options(headless=HEADLESS):
    options = webdriver.ChromeOptions()
    if headless:
        options.add_argument("--headless=new")
        options.add_argument("--disable-gpu")
        # headless Chrome ignores maximize, give it a real desktop size
        options.add_argument("--window-size=1920,1080")
    return options


def start_session(timeout=WAIT_TIMEOUT, headless=HEADLESS):
    """
    Launch Chrome and return (driver, wait).
    Any failure here propagates: nothing gets checked without a browser.
    """
    # This automatically downloads the correct driver for your Chrome version
    driver = webdriver.Chrome(service=Service(ChromeDriverManager().install()),
                              options=build_options(headless))
    driver.maximize_window()
    wait = WebDriverWait(driver, timeout)
    return driver, wait


def stop_session(driver):
    """Close the browser if one was started."""
    if driver is not None:
        driver.quit()


@contextmanager
def browser_session(timeout=WAIT_TIMEOUT, headless=HEADLESS):
    driver = None
    try:
        driver, wait = start_session(timeout=timeout, headless=headless)
        yield driver, wait
    finally:
        stop_session(driver)
