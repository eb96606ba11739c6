"""Make layer package directories importable.

The Lambda runtime only adds `/opt/python` and the runtime's own
site-packages to `sys.path`. Packages that a layer installs under a
versioned `lib/pythonX.Y/site-packages` directory can be missed when the
layer was built for a different interpreter layout, so the directories are
added here before anything else is imported.
"""

import glob
import importlib
import logging
import os
import site
import sys

from .result import Outcome

logger = logging.getLogger(__name__)

PACKAGE_LAYOUT = ("lib", "python*", "site-packages")


def discover_package_dirs(root: str) -> list[str]:
    """Return the site-packages directories directly under root."""
    pattern = os.path.join(root, *PACKAGE_LAYOUT)
    return sorted(path for path in glob.glob(pattern) if os.path.isdir(path))


def _site_entries(path: str, known: list[str]) -> list[str]:
    """The directory plus the entries its .pth files contribute.

    `site.addsitedir` only works on sys.path, so the new entries are read
    back and sys.path is restored; imports run by .pth files still happen.
    """
    before = list(sys.path)
    try:
        site.addsitedir(path, known_paths=set(known))
        new = [p for p in sys.path if p not in before]
    finally:
        sys.path[:] = before
    return [path] + [p for p in new if p != path]


def reconcile_search_path(roots, search_path: list[str] | None = None) -> Outcome:
    """Prepend discovered package directories to the search path.

    Each directory is registered as a site directory, so paths listed in its
    .pth files are prepended right after it.

    Entries already present are skipped, so repeated runs add nothing.
    Failures never escape: the caller gets a failed Outcome and the search
    path is left unchanged.
    """
    if search_path is None:
        search_path = sys.path
    added: list[str] = []
    try:
        for root in roots or ():
            if not os.path.isdir(root):
                continue
            for path in discover_package_dirs(root):
                if path in search_path or path in added:
                    continue
                for entry in _site_entries(path, [*search_path, *added]):
                    if entry not in search_path and entry not in added:
                        added.append(entry)
    except (OSError, TypeError, ValueError) as e:
        logger.debug("Search path reconciliation skipped: %s", e)
        return Outcome.failure(str(e))

    search_path[0:0] = added
    if added:
        importlib.invalidate_caches()
    return Outcome.success(added)
