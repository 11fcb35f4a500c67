"""Copy disk-based dependencies into an output directory.

Static HTML files can only reference dependencies that live next to them, so
build steps stage each dependency under ``<output_dir>/<name>-<version>/``.

If that subdirectory already exists nothing is copied: its contents are
assumed to be up to date. Files are copied into a hidden sibling directory
first and renamed into place once the copy is complete; a failed copy leaves
no target behind. Callers that change a dependency's files without bumping
its version must remove the stale copy themselves.

No locking is done. When two processes stage the same name+version into the
same directory, the first rename wins and the other call raises OSError.
"""

import shutil
import tempfile
from pathlib import Path

from htmldeps.errors import NotDiskBased
from htmldeps.models.dependency import HtmlDependency
from htmldeps.utils.logging import get_logger

logger = get_logger("htmldeps.staging.copy")


def target_dir_name(dependency: HtmlDependency) -> str:
    """``"<name>-<version>"``, e.g. ``jquery-3.7.1``."""
    return f"{dependency.name}-{dependency.version}"


def _copy_children(source: Path, target: Path) -> None:
    """Copy every direct child of *source* into *target*, directories recursively."""
    for child in sorted(source.iterdir()):
        destination = target / child.name
        if child.is_dir():
            shutil.copytree(child, destination, dirs_exist_ok=True)
        else:
            shutil.copy2(child, destination)


def copy_dependency_to_dir(
    dependency: HtmlDependency,
    output_dir: "str | Path",
    must_work: bool = True,
) -> HtmlDependency:
    """Copy *dependency*'s directory to a subdirectory of *output_dir*.

    Args:
        dependency: A single HTML dependency.
        output_dir: Directory in which ``<name>-<version>/`` is created.
            Created (with parents) when missing.
        must_work: If ``True`` and *dependency* has no ``file`` source, raise.
            If ``False``, such dependencies are returned unchanged.

    Returns:
        A copy of *dependency* whose first ``file`` entry is the absolute
        path of the staged directory. Other ``src`` entries are kept.

    Raises:
        NotDiskBased: If *dependency* has no ``file`` source and *must_work*.
    """
    source_dir = dependency.source("file")
    if source_dir is None:
        if must_work:
            raise NotDiskBased(f"ERROR: dependency {dependency.label} is not disk-based")
        logger.info("dependency_not_disk_based", dependency=dependency.label)
        return dependency

    output = Path(output_dir)
    output.mkdir(parents=True, exist_ok=True)

    target = output / target_dir_name(dependency)
    if target.exists():
        logger.debug(
            "dependency_copy_skipped",
            dependency=dependency.label,
            target=str(target),
        )
    else:
        staging = Path(tempfile.mkdtemp(prefix=f".{target.name}-", dir=output))
        try:
            _copy_children(Path(source_dir), staging)
            # mkdtemp creates the directory as 0700.
            staging.chmod(0o755)
            staging.rename(target)
        except OSError:
            shutil.rmtree(staging, ignore_errors=True)
            logger.error(
                "dependency_copy_failed",
                dependency=dependency.label,
                source=source_dir,
                target=str(target),
            )
            raise
        logger.info(
            "dependency_copied",
            dependency=dependency.label,
            source=source_dir,
            target=str(target),
        )

    return dependency.with_source("file", target.resolve().as_posix())
