import sys
import time
from datetime import datetime

import requests

from browser_session import browser_session
from symbol_compare import SymbolMismatch, comparison_table, diff_symbols
from symbol_config import (EXPECTED_STOCK_SYMBOLS, EXPECTED_TITLE, FINANCE_URL, HEADLESS,
                           REACHABILITY_TIMEOUT, SECTION_XPATH, SYMBOL_XPATH, WAIT_TIMEOUT)
from symbol_scraper import (SymbolCheckError, collect_symbols, open_page, verify_title,
                            wait_for_section)

headers = {
    'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0 Safari/537.36'
}


def site_reachable(url=FINANCE_URL, timeout=REACHABILITY_TIMEOUT):
    """Cheap HTTP check before spending time on a browser."""
    try:
        response = requests.get(url, headers=headers, timeout=timeout)
    except requests.exceptions.RequestException:
        return False
    return response.status_code < 500


def report(expected, actual, result):
    print(f"Actual symbols from UI: {actual}")
    print(f"Extra symbols (in UI, not expected): {result.extra}")
    print(f"Missing symbols (expected but not in UI): {result.missing}")
    print()
    print(comparison_table(expected, actual).to_string(index=False))


def run_check(expected=EXPECTED_STOCK_SYMBOLS, url=FINANCE_URL, title=EXPECTED_TITLE,
              section_locator=SECTION_XPATH, item_locator=SYMBOL_XPATH,
              timeout=WAIT_TIMEOUT, headless=HEADLESS, session=browser_session):
    """
    Open the page, scrape the suggested tickers and compare them with `expected`.
    Returns the SymbolDiff on a match, raises SymbolMismatch otherwise.
    """
    with session(timeout=timeout, headless=headless) as (driver, wait):
        # 1. Open Google Finance
        print("Navigating to target...")
        open_page(driver, url)

        # 2. Make sure we landed on the right page
        page_title = verify_title(driver, title)
        print(f"Target Acquired. Page Title: {page_title}")

        # 3. Wait for the section, then read the symbols
        wait_for_section(wait, section_locator)
        actual = collect_symbols(driver, item_locator)

    # 4. Compare (expected to fail now and then, the section is personalised)
    result = diff_symbols(expected, actual)
    report(expected, actual, result)
    if not result.matches:
        raise SymbolMismatch(result)
    return result


# MAIN
def main():
    print(f"\n{'='*70}")
    print(f"GOOGLE FINANCE SYMBOL CHECK")
    print(f"{'='*70}")
    print(f"  Target:   {FINANCE_URL}")
    print(f"  Expected: {', '.join(EXPECTED_STOCK_SYMBOLS)}")
    print(f"  Timeout:  {WAIT_TIMEOUT}s")
    print(f"  Started:  {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print(f"{'='*70}\n")

    start = time.time()
    exit_code = 1
    try:
        run_check()
        print("\n--- SYMBOL CHECK PASSED ---")
        exit_code = 0
    except SymbolMismatch as e:
        print(f"\n--- SYMBOL CHECK FAILED ---")
        print(f"Error: {e}")
    except SymbolCheckError as e:
        print(f"\n--- SYSTEM FAILURE ---")
        print(f"Error: {e}")
    finally:
        print(f"  Finished in {time.time() - start:.1f}s")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
