"""Planning, rendering, and assembling the pages of a generated site."""

from .assembler import PageAssembler
from .link_rewriter import DocumentLinkExtension
from .models import GeneratedPage, GenerationState, NavEntry, SiteGenerationResult
from .navigation import build_nav
from .page_renderer import PageRenderer
from .renderer import HtmlContentRenderer
from .site_generator import SiteGenerator
from .stylesheet import resolve_stylesheet

__all__ = [
    "DocumentLinkExtension",
    "GeneratedPage",
    "GenerationState",
    "HtmlContentRenderer",
    "NavEntry",
    "PageAssembler",
    "PageRenderer",
    "SiteGenerationResult",
    "SiteGenerator",
    "build_nav",
    "resolve_stylesheet",
]
