from datetime import datetime

# -- Project information -----------------------------------------------------

project = "webui.automation"
copyright = f"2020-{datetime.now().year}, webui.automation contributors (Apache license 2)"
author = "webui.automation contributors"

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
]

intersphinx_mapping = {
    "python": ("http://docs.python.org/3.12/", None),
    "playwright": ("https://playwright.dev/python/", None),
}

autodoc_member_order = "bysource"

templates_path = ["_templates"]

master_doc = "index"

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store", "examples"]

# -- Options for HTML output -------------------------------------------------

html_theme = "nature"
