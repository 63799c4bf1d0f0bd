"""Manipulate URL paths without requiring the target to exist on a server or in the filesystem.

This is useful for manipulating location references, such as links found in a document, relative to the location of
that document:

    >>> str(UrlPath("src/md/./../../README.md"))
    'README.md'
    >>> UrlPath("https://example.com/docs/TODO.md").is_external()
    True
"""

from __future__ import annotations

import abc
import logging
from abc import abstractmethod
from typing import NoReturn
from urllib.parse import urljoin

from databricks.labs.urlpath import _posixpath

logger = logging.getLogger(__name__)


def canonicalize(path: str) -> tuple[str | None, str | None]:
    """Resolve the segments of a path without consulting any filesystem.

    Empty and '.' segments are dropped, and each '..' removes the segment collected before it. A '..' with nothing left
    to remove is discarded: the result never escapes above the start of the path, irrespective of whether the path is
    absolute or relative.

    Args:
        path: the path to canonicalize.
    Returns:
        A tuple containing:
          - The resolved directory segments joined with '/', or None if there aren't any.
          - The final resolved segment, or None if the path resolved to nothing.
    """
    resolved: list[str] = []
    for segment in path.split(_posixpath.sep):
        if not segment or segment == _posixpath.curdir:
            continue
        if segment == _posixpath.pardir:
            if resolved:
                resolved.pop()
            else:
                logger.debug(f"Discarding '..' above the start of: {path}")
            continue
        resolved.append(segment)
    last = resolved.pop() if resolved else None
    parent = _posixpath.sep.join(resolved) or None
    return parent, last


class UrlPath(abc.ABC):
    """A location reference: either a structural path or an external (fully-qualified) reference.

    Instantiating this class yields the appropriate variant, in the same way that pathlib.Path yields a PosixPath or a
    WindowsPath. Instances are immutable and hashable.
    """

    __slots__ = ()

    def __new__(cls, path: str | UrlPath = ""):
        if cls is UrlPath:
            raw_path = cls._to_raw_path(path)
            if raw_path.startswith(_posixpath.external_schemes):
                logger.debug(f"Treating as external reference: {raw_path}")
                return object.__new__(ExternalPath)
            return object.__new__(StructuralPath)
        return object.__new__(cls)

    @classmethod
    def new(cls, path: str | UrlPath = "") -> UrlPath:
        """Parse a path; equivalent to calling the class."""
        return cls(path)

    @staticmethod
    def _to_raw_path(path: str | UrlPath) -> str:
        if isinstance(path, UrlPath):
            return str(path)
        if not isinstance(path, str):
            msg = f"argument should be a str or a UrlPath, not {type(path).__name__!r}"
            raise TypeError(msg)
        return path

    @abstractmethod
    def is_absolute(self) -> bool:
        """Whether the path started with '/'. Always false for external references."""

    @abstractmethod
    def is_external(self) -> bool:
        """Whether this is a fully-qualified reference that is passed through as-is."""

    @property
    @abstractmethod
    def parent(self) -> str | None:
        """The resolved directory segments joined with '/', or None if there aren't any."""

    @property
    @abstractmethod
    def last(self) -> str | None:
        """The final resolved segment (typically a file name), or None if the path resolved to nothing."""

    @property
    @abstractmethod
    def parts(self) -> tuple[str, ...]:
        """The resolved segments of the path."""

    @abstractmethod
    def normalize(self) -> str:
        """Render the normalized form of this path."""

    @abstractmethod
    def resolve(self, reference: str | UrlPath) -> UrlPath:
        """Resolve a reference that appears in the document located at this path."""

    def __setattr__(self, name: str, value) -> NoReturn:
        msg = f"{self.__class__.__qualname__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> NoReturn:
        msg = f"{self.__class__.__qualname__} is immutable"
        raise AttributeError(msg)

    def __reduce__(self):
        # Re-parsing the rendered form yields an equal instance for both variants.
        return self.__class__, (str(self),)

    def __str__(self) -> str:
        return self.normalize()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({str(self)!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, UrlPath):
            return NotImplemented
        return type(self) is type(other) and str(self) == str(other)

    def __hash__(self) -> int:
        return hash((self.__class__.__qualname__, str(self)))


class StructuralPath(UrlPath):
    """A path made up of resolved directory segments and a final segment."""

    __slots__ = ("_parent", "_last", "_is_absolute")

    _parent: str | None
    _last: str | None
    _is_absolute: bool

    def __init__(self, path: str | UrlPath = "") -> None:
        raw_path = self._to_raw_path(path)
        parent, last = canonicalize(raw_path)
        object.__setattr__(self, "_parent", parent)
        object.__setattr__(self, "_last", last)
        object.__setattr__(self, "_is_absolute", raw_path.startswith(_posixpath.sep))

    def is_absolute(self) -> bool:
        return self._is_absolute

    def is_external(self) -> bool:
        return False

    @property
    def parent(self) -> str | None:
        return self._parent

    @property
    def last(self) -> str | None:
        return self._last

    @property
    def parts(self) -> tuple[str, ...]:
        parents = tuple(self._parent.split(_posixpath.sep)) if self._parent else ()
        if self._last is None:
            return parents
        return *parents, self._last

    def normalize(self) -> str:
        if self._parent is not None and self._last is not None:
            body = f"{self._parent}{_posixpath.sep}{self._last}"
        else:
            body = self._parent or self._last or ""
        if self._is_absolute:
            return _posixpath.sep + body
        return body

    def resolve(self, reference: str | UrlPath) -> UrlPath:
        """Resolve a reference that appears in the document located at this path.

        External and absolute references stand on their own. Relative references are taken relative to the directory
        of this path, and any '..' segments in them are resolved against it.

        Args:
            reference: the reference to resolve.
        Returns:
            The resolved location.
        """
        # The reference must be joined in its raw form: normalizing it first would discard its leading '..' segments.
        raw_reference = self._to_raw_path(reference)
        target = UrlPath(raw_reference)
        if target.is_external() or target.is_absolute():
            return target
        joined = _posixpath.sep.join(part for part in (self._parent, raw_reference) if part)
        if self._is_absolute:
            joined = _posixpath.sep + joined
        return StructuralPath(joined)


class ExternalPath(UrlPath):
    """A fully-qualified reference, such as an http(s) URL, that is kept verbatim."""

    __slots__ = ("_url",)

    _url: str

    def __init__(self, path: str | UrlPath = "") -> None:
        object.__setattr__(self, "_url", self._to_raw_path(path))

    def is_absolute(self) -> bool:
        return False

    def is_external(self) -> bool:
        return True

    @property
    def parent(self) -> None:
        return None

    @property
    def last(self) -> None:
        return None

    @property
    def parts(self) -> tuple[str, ...]:
        return ()

    def normalize(self) -> str:
        return self._url

    def resolve(self, reference: str | UrlPath) -> UrlPath:
        """Resolve a reference that appears in the document at this URL.

        External references stand on their own; anything else is joined with this URL using standard URL joining. If
        this URL is too malformed to join with (such as an unbalanced IPv6 host), the reference is parsed on its own.

        Args:
            reference: the reference to resolve.
        Returns:
            The resolved location.
        """
        raw_reference = self._to_raw_path(reference)
        target = UrlPath(raw_reference)
        if target.is_external():
            return target
        try:
            joined = urljoin(self._url, raw_reference)
        except ValueError as e:
            logger.debug(f"Cannot join {raw_reference} with malformed URL: {self._url}", exc_info=e)
            return target
        return ExternalPath(joined)
