"""Common literal values used across md_deploy.

These constants keep the output layout and template names centralized so the
generator, CLI, and tests agree on where every artefact lands.

Examples
--------
>>> from md_deploy import _constants
>>> _constants.OUTPUT_DIRNAME
'docs'
>>> f"{_constants.CSS_DIRNAME}/{_constants.STYLESHEET_NAME}"
'css/styles.css'
"""

OUTPUT_DIRNAME = "docs"
CSS_DIRNAME = "css"
HTML_DIRNAME = "html"
STYLESHEET_NAME = "styles.css"
INDEX_FILENAME = "index.html"
HOME_TITLE = "Home"
PAGE_SUFFIX = ".html"
SOURCE_SUFFIXES = (".md", ".markdown")
DEFAULT_CONFIG_NAME = "md-deploy.yaml"
DEFAULT_EXCLUDES = (".git", "node_modules")
