"""Async wrappers around blocking filesystem calls.

Every directory listing, size walk and delete goes through the
default executor so the event loop only ever waits on I/O.
"""

import asyncio
import os
import shutil


async def async_scandir(path: str) -> list[os.DirEntry[str]]:
    """List a directory's immediate children without blocking the loop.

    Raises:
        OSError: If the directory cannot be read.
    """
    loop = asyncio.get_running_loop()

    def _scandir() -> list[os.DirEntry[str]]:
        with os.scandir(path) as entries:
            return list(entries)

    return await loop.run_in_executor(None, _scandir)


def _sum_directory(path: str) -> tuple[int, list[str]]:
    """Sum regular file sizes in one directory and list its subdirectories.

    Symlinks are neither followed nor counted. Entries that vanish or
    cannot be stat'ed contribute nothing.
    """
    total = 0
    subdirs: list[str] = []
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        subdirs.append(entry.path)
                    elif entry.is_file(follow_symlinks=False):
                        total += entry.stat(follow_symlinks=False).st_size
                except OSError:
                    continue
    except OSError:
        return 0, []
    return total, subdirs


async def folder_size(path: str) -> int:
    """Compute the recursive byte size of a directory tree.

    Walks the tree with an explicit stack, one executor hop per
    directory. Unreadable branches count as zero.

    Args:
        path: Directory to measure.

    Returns:
        Total size of regular files under the directory.
    """
    loop = asyncio.get_running_loop()
    total = 0
    stack = [path]
    while stack:
        current = stack.pop()
        size, subdirs = await loop.run_in_executor(None, _sum_directory, current)
        total += size
        stack.extend(subdirs)
    return total


def remove_tree(path: str) -> None:
    """Remove a file, symlink or directory tree.

    A path that no longer exists, or that vanishes while it is being
    removed, is treated as already removed.

    Raises:
        OSError: If removal fails.
    """
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        elif os.path.lexists(path):
            os.unlink(path)
    except FileNotFoundError:
        # Part of the tree went away underneath us; clear whatever is left
        if os.path.lexists(path):
            remove_tree(path)


async def async_remove_tree(path: str) -> None:
    """Remove a path without blocking the loop."""
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, remove_tree, path)
