"""Waits for a text field, types into it and submits its form."""

from webui import Browser
from webui import Settings
from webui.elements import TextField

with Browser(settings=Settings.from_env()).launch(url="https://www.google.com/") as browser:
    search_box = TextField(browser, name="q")
    search_box.wait_until_visible()
    search_box.set_text("webui automation")
    search_box.submit()
    browser.sleep(2)
    print(browser.title)
