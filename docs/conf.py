"""Sphinx configuration for utf8codec documentation."""

import utf8codec

project = "utf8codec"
copyright = "2026, utf8codec contributors"
author = "utf8codec contributors"
release = utf8codec.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

templates_path = ["_templates"]
exclude_patterns = ["_build"]

html_theme = "furo"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
