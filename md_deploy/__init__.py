"""Turn a workspace of Markdown documents into a browsable static site.

This package exposes the CLI entry points used by the ``md-deploy`` console
script, plus the :class:`~md_deploy.generator.SiteGenerator` that does the
work.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from md_deploy import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
