"""Exceptions raised while declaring, staging and rendering HTML dependencies.

Every error is a ``ValueError`` subclass: they all describe deterministic
logic problems (a bad declaration, a path outside its base), never transient
I/O faults, so callers should not retry them.
"""


class DependencyError(ValueError):
    """Base class for all htmldeps errors."""


class InvalidDescriptor(DependencyError):
    """A dependency declaration is malformed (empty src, unknown kind, ...)."""


class UnknownSourceKind(DependencyError):
    """A source preference order names a kind other than ``file`` / ``href``."""


class NoUsableSource(DependencyError):
    """None of the preferred source kinds is present on a dependency."""


class NotDiskBased(DependencyError):
    """A staging operation needs a ``file`` source the dependency lacks."""


class NotADescendant(DependencyError):
    """A path does not live under the directory it should be relative to."""
