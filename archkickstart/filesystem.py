"""Small file helpers."""

from __future__ import annotations

import urllib.request
from os import PathLike
from pathlib import Path


def replace_string_in_file(
    file_path: str | PathLike[str], search_string: str, new_line: str
) -> bool:
    """Replace every occurrence of a string in a file; True if written back.

    A file that cannot be read raises ``OSError``.
    """
    path = Path(file_path)
    content = path.read_text(encoding="utf-8").replace(search_string, new_line)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError:
        return False
    return True


def download_file(url: str, target_path: str | PathLike[str]) -> None:
    """Fetch a URL and store the response body at ``target_path``."""
    with urllib.request.urlopen(url) as response:
        data = response.read()
    Path(target_path).write_bytes(data)