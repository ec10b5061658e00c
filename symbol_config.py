import os

# --- CONFIGURATION ---
# 1. The Target (Google Finance home page)
FINANCE_URL = "https://www.google.com/finance"
EXPECTED_TITLE = "Google Finance"

# 2. Where the symbols live
# The heading of the "You may be interested in" block
SECTION_XPATH = "//div[@id='smart-watchlist-title' and contains(.,'You may be interested in')]"
# Ticker labels inside that block
SYMBOL_XPATH = "//section[@aria-labelledby='smart-watchlist-title']//div[contains(@class,'COaKTb')]"

# 3. How long to wait for the section to show up (seconds)
WAIT_TIMEOUT = 15
REACHABILITY_TIMEOUT = 10

# 4. What we expect to see. Never mutated.
EXPECTED_STOCK_SYMBOLS = (
    "AAPL", "GOOG", "TSLA", "MSFT", "AMZN", "NVDA", "NFLX", "META", "AMD"
)

# Run Chrome invisible on CI boxes: SYMBOL_CHECK_HEADLESS=1
HEADLESS = os.environ.get("SYMBOL_CHECK_HEADLESS", "").lower() in ("1", "true", "yes")
