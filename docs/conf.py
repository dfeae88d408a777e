"""Sphinx configuration for jsarray documentation."""

from importlib.metadata import version as get_version

# -- Project information -----------------------------------------------------
project = 'jsarray'
copyright = '2025, Anansi Development'
author = 'Anansi Development'
release = get_version('jsarray')
version = '.'.join(release.split('.')[:2])

# -- General configuration ---------------------------------------------------
extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
]

templates_path = ['_templates']
exclude_patterns = ['_build']

# Google-style docstrings only
napoleon_google_docstring = True
napoleon_numpy_docstring = False

# -- Options for HTML output -------------------------------------------------
html_theme = 'sphinx_rtd_theme'

# -- Intersphinx configuration -----------------------------------------------
intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
}

# -- Autodoc configuration ---------------------------------------------------
autodoc_typehints = 'description'
autodoc_member_order = 'groupwise'
autodoc_default_options = {
    'members': True,
    'special-members': '__init__, __getitem__, __setitem__',
    'exclude-members': '__weakref__',
}
