"""URL path flavour, in the same vein as :module:`posixpath` and :module:`ntpath`.

Paths are Posix-like: only '/' separates segments, and there is no drive or '//'-root handling. Strings carrying one of
the external scheme prefixes are fully-qualified references and are never split.
"""

from posixpath import curdir, pardir, sep

external_schemes = ("http:", "https:")

__all__ = ("curdir", "external_schemes", "pardir", "sep")
