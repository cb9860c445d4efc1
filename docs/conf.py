# docs/conf.py
from __future__ import annotations

import os
import sys
from datetime import date
from pathlib import Path

# -- Path setup --------------------------------------------------------------
# docs/ sits next to manual_tours/; autodoc imports the package from the repo root
sys.path.insert(0, os.path.abspath(".."))

# -- Project information -----------------------------------------------------
project = "manual_tours"
author = "manual_tours developers"
copyright = f"{date.today().year}, {author}"

# Prefer the package's __version__ when available
try:
    import manual_tours  # noqa: F401

    release = getattr(manual_tours, "__version__", "0+unknown")
except ImportError:
    release = "0+unknown"

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",  # Numpy docstrings
    "sphinx.ext.autosummary",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    # Notebook support + notebook-native gallery
    "myst_nb",
    "myst_sphinx_gallery",
]

templates_path = ["_templates"]
exclude_patterns = [
    "_build",
    "**/.DS_Store",
    "**/.ipynb_checkpoints",
    "**/__pycache__",
]

# api.md pulls everything from manual_tours.api, so stubs follow its __all__
autosummary_generate = True

# manual_tours docstrings use the numpy "Parameters / Returns / Raises" layout
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_include_init_with_doc = False
napoleon_include_private_with_doc = False
napoleon_use_param = True
napoleon_use_rtype = True

autodoc_member_order = "bysource"
autodoc_typehints = "description"
autodoc_typehints_format = "short"

autodoc_default_options = {
    "members": True,
    "member-order": "bysource",
    "show-inheritance": True,
    "exclude-members": "__init__",
}

# -- MyST-NB settings --------------------------------------------------------
source_suffix = {
    ".rst": "restructuredtext",
    ".md": "myst-nb",
    ".ipynb": "myst-nb",
}

# The tutorial draws frames with matplotlib; outputs are saved, not re-executed on build
nb_execution_mode = "off"

# -- Options for HTML output -------------------------------------------------
html_theme = "sphinx_rtd_theme"
html_theme_options = {
    "collapse_navigation": False,
    "navigation_depth": 3,
}

# -- Intersphinx -------------------------------------------------------------
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    # FrameTables and labelled bases are pandas DataFrames
    "pandas": ("https://pandas.pydata.org/docs/", None),
}

# -- MyST Sphinx Gallery -----------------------------------------------------
from myst_sphinx_gallery import GalleryConfig  # noqa: E402

# notebooks/tutorials/*.py (jupyter exports) become the "Tutorials" gallery linked from index.md
myst_sphinx_gallery_config = GalleryConfig(
    root_dir=Path(__file__).resolve().parent,
    examples_dirs=["../notebooks/tutorials"],
    gallery_dirs=["tutorials/auto_examples"],
    notebook_thumbnail_strategy="code",
)

# dollar math for the $\phi$ and $\theta$ notation in tutorial markdown cells
myst_enable_extensions = [
    "dollarmath",
    "amsmath",
    "colon_fence",
]
