"""Expose package store packages inside a workspace through symbolic links."""

from __future__ import annotations

import shutil
from pathlib import Path

from foswitch.common import create_logger
from foswitch.constants import METADATA_DIR_NAME
from foswitch.errors import WorkspaceNotFoundError
from foswitch.paths import PathResolver

from .models import PackageLink

logger = create_logger("linker")


def metadata_dir_for(workspace_dir: Path) -> Path:
    if workspace_dir.name == METADATA_DIR_NAME:
        return workspace_dir
    return workspace_dir / METADATA_DIR_NAME


class PackageLinker:
    def __init__(self, resolver: PathResolver) -> None:
        self._resolver = resolver

    def link_packages(self, workspace_dir: Path, package_store: Path | None = None) -> list[PackageLink]:
        """Link every package store subdirectory into the workspace metadata directory.

        Anything already present under a package's name is removed first. There is
        no rollback: a failure leaves links created so far in place.
        """
        if not workspace_dir.exists():
            raise WorkspaceNotFoundError(workspace_dir, f"Workspace directory not found: {workspace_dir}")

        metadata_dir = metadata_dir_for(workspace_dir)
        store = self._resolver.resolve_package_store_directory(package_store)
        metadata_dir.mkdir(parents=True, exist_ok=True)
        logger.info("Linking packages", store=str(store), metadata_dir=str(metadata_dir))

        links: list[PackageLink] = []
        for package in sorted(entry for entry in store.iterdir() if entry.is_dir()):
            link = metadata_dir / package.name
            replaced = _remove_existing(link)
            link.symlink_to(package, target_is_directory=True)
            logger.debug("Package linked", package=package.name, replaced=replaced)
            links.append(PackageLink(name=package.name, link=link, target=package, replaced=replaced))

        logger.info("Packages linked", count=len(links))
        return links


def _remove_existing(path: Path) -> bool:
    if path.is_symlink() or path.is_junction() or path.is_file():
        path.unlink()
        return True
    if path.is_dir():
        shutil.rmtree(path)
        return True
    return False
