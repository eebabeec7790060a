"""Sphinx configuration file for qcontacts documentation."""

import sys
from pathlib import Path

# Add src to path so autodoc can find the package
sys.path.insert(0, str(Path("../../src").resolve()))

# Project information
project = "qcontacts"
copyright = "2025, qcontacts developers"  # noqa: A001
author = "qcontacts developers"
release = "0.1.0"

# Extensions
extensions = [
  "sphinx.ext.autodoc",
  "sphinx.ext.viewcode",
  "sphinx.ext.napoleon",
  "sphinx.ext.intersphinx",
  "sphinx_autodoc_typehints",
  "sphinx_copybutton",
]

# Napoleon settings for Google-style docstrings
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = False
napoleon_include_private_with_doc = False

# Autodoc settings
autodoc_typehints = "description"
autodoc_member_order = "bysource"

# HTML theme
html_theme = "sphinx_book_theme"

source_suffix = [".rst"]

intersphinx_mapping = {
  "python": ("https://docs.python.org/3", None),
  "numpy": ("https://numpy.org/doc/stable/", None),
  "biotite": ("https://www.biotite-python.org/", None),
}

main_doc = "index"

language = "en"

html_theme_options = {
  "show_toc_level": 2,
  "navigation_with_keys": False,
}

copybutton_prompt_text = r">>> |\.\.\. |\$ "
copybutton_prompt_is_regexp = True
