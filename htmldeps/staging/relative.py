"""Rewrite absolute dependency paths relative to a base directory."""

from pathlib import Path

from htmldeps.errors import NotADescendant, NotDiskBased
from htmldeps.models.dependency import HtmlDependency
from htmldeps.utils.logging import get_logger

logger = get_logger("htmldeps.staging.relative")


def relative_to(directory: str, path: str) -> str:
    """Return *path* relative to *directory*.

    *directory* is given exactly one trailing ``/`` before the prefix test,
    so ``/out`` never matches ``/output/x``.

    Raises:
        NotADescendant: If *path* is not inside *directory*. A wrong relative
            path would silently break the page, so there is no lenient mode.
    """
    prefix = directory.rstrip("/") + "/"
    if path.startswith(prefix):
        return path[len(prefix):]
    raise NotADescendant(
        f"ERROR: the path {path} does not appear to be a descendant of {prefix}"
    )


def make_dependency_relative(
    dependency: HtmlDependency,
    basepath: "str | Path",
    must_work: bool = True,
) -> HtmlDependency:
    """Make *dependency*'s ``file`` location relative to *basepath*.

    *basepath* is resolved to its canonical absolute form (symlinks included)
    first. The returned copy has ``src`` replaced by a single ``file`` entry;
    any ``href`` or other entries are dropped.

    Raises:
        NotDiskBased: If *dependency* has no ``file`` source and *must_work*.
        NotADescendant: If the ``file`` location is outside *basepath*,
            whatever the value of *must_work*.
    """
    base = Path(basepath).resolve().as_posix()
    source_dir = dependency.source("file")
    if source_dir is None:
        if must_work:
            raise NotDiskBased(
                f"ERROR: could not make dependency {dependency.label} relative; "
                "it is not file-based"
            )
        logger.info("dependency_not_disk_based", dependency=dependency.label)
        return dependency

    relative = relative_to(base, source_dir)
    logger.debug(
        "dependency_made_relative",
        dependency=dependency.label,
        base=base,
        path=relative,
    )
    return dependency.replace_src([("file", relative)])
