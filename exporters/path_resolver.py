"""Derivation of output file paths from post permalinks."""

import logging
import os
from pathlib import Path, PurePosixPath
from typing import Union

from errors import UnsafePathError

logger = logging.getLogger('wordpress_to_zola.exporters.path_resolver')

PAGE_SUFFIX = '.md'


def resolve(base_url: str, link: str) -> PurePosixPath:
    """
    Turn a permalink into a page path relative to the output root.

    The base URL is removed only when it is an exact prefix of the link;
    otherwise the link is used unchanged. Leading and trailing slashes are
    stripped and ``.md`` is appended, so ``https://example.com/2020/01/hello/``
    under ``https://example.com`` becomes ``2020/01/hello.md``.
    """
    remainder = link
    if base_url and link.startswith(base_url):
        remainder = link[len(base_url):]
    return PurePosixPath(remainder.strip('/') + PAGE_SUFFIX)


def resolve_under(output_root: Union[str, Path], base_url: str, link: str,
                  confine: bool = False) -> Path:
    """
    Resolve a permalink to a page path inside ``output_root``.

    Segments such as ``..`` are not rewritten. When ``confine`` is set a path
    leaving the output root raises UnsafePathError; otherwise it is logged
    and returned as is.
    """
    relative = resolve(base_url, link)
    path = Path(output_root).joinpath(*relative.parts)

    if not is_within(output_root, path):
        if confine:
            raise UnsafePathError(path, output_root)
        logger.warning(f"Path {path} for {link} escapes output root {output_root}")

    return path


def is_within(root: Union[str, Path], path: Union[str, Path]) -> bool:
    """Check whether ``path`` stays inside ``root`` once normalized."""
    root_abs = os.path.abspath(root)
    path_abs = os.path.abspath(path)
    return os.path.commonpath([root_abs, path_abs]) == root_abs


__all__ = ['PAGE_SUFFIX', 'is_within', 'resolve', 'resolve_under']
