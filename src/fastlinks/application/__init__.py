"""Application services: template compilation, caching and the link facade.

FastLinks is the main facade for building links.
"""

from fastlinks.application.cache import TemplateCache
from fastlinks.application.compiler import LinkTemplateCompiler
from fastlinks.application.facade import FastLinks, configure, default_links, link_to

__all__ = [
    "FastLinks",
    "LinkTemplateCompiler",
    "TemplateCache",
    "configure",
    "default_links",
    "link_to",
]
