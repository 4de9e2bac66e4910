"""Mount-path resolution.

The site can be served under an arbitrary prefix (a reverse proxy, or a
parent ASGI app mounting it). Nothing configures that prefix; it is derived
per request by comparing the path the client asked for with the path left
after the host stripped its mount point.
"""

from __future__ import annotations

from typing import Optional


def resolve_mount_path(original_path: Optional[str], current_path: str) -> str:
    """Return the URL prefix the app is mounted under, without trailing ``/``.

    Textual, not structural: the prefix is everything in ``original_path``
    before the *last* occurrence of ``current_path``. A path that repeats the
    same substring can therefore resolve to a longer prefix than the real
    mount point.

    >>> resolve_mount_path("/app/schedule/abc", "/schedule/abc")
    '/app'
    >>> resolve_mount_path("/schedule", "/schedule")
    ''
    >>> resolve_mount_path(None, "/schedule")
    ''
    """
    if original_path is None:
        return ""
    index = original_path.rfind(current_path)
    if index == -1:
        return ""
    return original_path[:index]


def _strip_root(path: str, root_path: str) -> str:
    if root_path and (path == root_path or path.startswith(root_path + "/")):
        return path[len(root_path):] or "/"
    return path


def request_paths(scope: dict) -> tuple[Optional[str], str]:
    """Extract ``(original_path, current_path)`` from an ASGI scope.

    Both come from the undecoded request target (``raw_path``), so they stay
    comparable as text: the original is ``raw_path`` as received, the current
    is ``raw_path`` with the ``root_path`` segment removed. Without a
    ``raw_path`` the original is ``None`` and the current falls back to the
    decoded ``path``. The route path is percent-decoded by the dispatcher.
    """
    root_path = scope.get("root_path") or ""
    raw_path = scope.get("raw_path")
    if raw_path is None:
        return None, _strip_root(scope.get("path") or "/", root_path)

    original = raw_path.decode("latin-1")
    return original, _strip_root(original, root_path)
