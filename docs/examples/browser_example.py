"""Drives a search form with the browser alone, no page objects."""

from webui import Browser
from webui import Settings

browser = Browser(settings=Settings.from_env()).launch(url="https://www.google.com/")
try:
    browser.send_keys("webui automation", "[name='q']")
    browser.submit("[name='q']")
    browser.sleep(2)
    print(browser.title)
finally:
    browser.dispose()
