"""Load and validate the optional site configuration YAML.

This subpackage parses ``md-deploy.yaml`` (or any path given on the command
line), applies defaults, and produces the frozen dataclasses
(:class:`SiteConfig`, :class:`SiteOptions`) that the generator consumes.

Examples
--------
>>> from pathlib import Path
>>> from md_deploy.config import load_site_config
>>> site = load_site_config(Path("md-deploy.yaml"))  # doctest: +SKIP
>>> site.options.accent_color  # doctest: +SKIP
'#007acc'
"""

from .loader import load_site_config, validate_output_dirname, validate_pygments_style
from .models import SiteConfig, SiteConfigError, SiteOptions

__all__ = [
    "SiteConfig",
    "SiteConfigError",
    "SiteOptions",
    "load_site_config",
    "validate_output_dirname",
    "validate_pygments_style",
]
