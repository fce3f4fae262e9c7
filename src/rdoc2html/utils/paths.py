#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rdoc2html/utils/paths.py
"""Relative URL computation between output documents.

Pure string algebra over ``/``-separated paths. Nothing here touches the
filesystem, so paths that do not exist resolve the same as ones that do.

"""

from __future__ import annotations

import posixpath


def _directory_segments(directory: str) -> list[str]:
    segments = [segment for segment in directory.split("/") if segment != "."]
    # "a/b/".split("/") leaves a trailing empty segment
    while segments and segments[-1] == "":
        segments.pop()
    return segments


def gen_relative_url(path: str, target: str) -> str:
    """Convert ``target`` to a URL relative to the document at ``path``.

    Parameters
    ----------
    path : str
        Output path of the document the link appears in
    target : str
        Path of the linked file, relative to the same root as ``path``

    Returns
    -------
    str
        Shortest relative path from the directory of ``path`` to ``target``

    Examples
    --------
        >>> gen_relative_url("a/b/c.html", "a/b/d.html")
        'd.html'
        >>> gen_relative_url("a/b/c.html", "a/x/d.html")
        '../x/d.html'

    """
    from_segments = _directory_segments(posixpath.dirname(path))
    to_directory, to_file = posixpath.split(target)
    to_segments = _directory_segments(to_directory)

    while from_segments and to_segments and from_segments[0] == to_segments[0]:
        from_segments.pop(0)
        to_segments.pop(0)

    relative = [".."] * len(from_segments)
    relative.extend(to_segments)
    relative.append(to_file)
    return "/".join(relative)
