"""Write a rendered project to disk.

The first failure stops the run. Artifacts created before the failure are
left in place and listed in the returned MaterializeReport.
"""

import logging
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from cppnew.core.renderer import RenderedFile, RenderedFileSet
from cppnew.errors import ScaffoldIOError
from cppnew.git.utils import GitError

logger = logging.getLogger(__name__)

RepositoryInitializer = Callable[[Path], None]


@dataclass
class MaterializeReport:
    """Outcome of a materialization run."""
    root: Path
    created: List[str] = field(default_factory=list)
    error: Optional[ScaffoldIOError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failed_artifact(self) -> Optional[str]:
        return self.error.artifact if self.error else None


def _make_dir(path: Path, artifact: str) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ScaffoldIOError(artifact, e) from e


def _write_file(root: Path, rendered: RenderedFile) -> None:
    path = root / rendered.relative_path
    _make_dir(path.parent, str(Path(rendered.relative_path).parent))
    try:
        path.write_text(rendered.content)
        if rendered.executable:
            path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    except OSError as e:
        raise ScaffoldIOError(rendered.relative_path, e) from e


def materialize(
    root: Path,
    file_set: RenderedFileSet,
    init_repository: Optional[RepositoryInitializer] = None,
) -> MaterializeReport:
    """Create the project tree under root.

    Args:
        root: Project root directory (created if missing, may already exist)
        file_set: Rendered files and directories
        init_repository: Called with root to initialize version control;
            the ignore file is written only if it succeeds

    Returns:
        MaterializeReport with created artifacts and the error, if any
    """
    report = MaterializeReport(root=root)

    try:
        _make_dir(root, root.name)
        report.created.append(f"{root.name}/")

        for rendered in file_set.files:
            _write_file(root, rendered)
            report.created.append(rendered.relative_path)
            logger.debug("Wrote %s", root / rendered.relative_path)

        for directory in file_set.directories:
            _make_dir(root / directory, directory)
            report.created.append(f"{directory}/")

        if init_repository is not None:
            try:
                init_repository(root)
            except GitError as e:
                raise ScaffoldIOError("git repository", e) from e
            report.created.append(".git/")

            if file_set.ignore_file is not None:
                _write_file(root, file_set.ignore_file)
                report.created.append(file_set.ignore_file.relative_path)
    except ScaffoldIOError as e:
        logger.debug("Materialization of %s stopped: %s", root, e)
        report.error = e

    return report
