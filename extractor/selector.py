"""目标文件选择

按文件名（不含目录部分）在根目录下递归查找目标文件。
遍历顺序为按名称排序的深度优先先序，保证同一文件系统状态下结果稳定。
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from .exceptions import SelectionError

logger = logging.getLogger(__name__)


def _walk_dir(directory: Path) -> Iterator[Path]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise SelectionError(path=str(directory), reason=e.strerror or str(e)) from e

    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = not is_dir and entry.is_file()
        except OSError as e:
            raise SelectionError(path=entry.path, reason=e.strerror or str(e)) from e
        if is_dir:
            yield from _walk_dir(Path(entry.path))
        elif is_file:
            yield Path(entry.path)
        else:
            logger.debug("skipping non-regular entry %s", entry.path)


def walk_files(root: str | Path) -> Iterator[Path]:
    """按字典序深度优先遍历 root 下所有普通文件

    目录项与文件项按名称混合排序，遇到目录立即进入（不跟随目录符号链接）。
    指向文件的符号链接按文件处理；指向目录的符号链接、失效链接、管道等
    非普通文件被跳过。root 本身是文件时只产出它自己。

    Raises:
        SelectionError: root 不存在/不可读，或遍历中任何目录无法读取
    """
    root = Path(os.path.abspath(root))
    try:
        is_dir = root.is_dir()
        is_file = not is_dir and root.is_file()
        if not (is_dir or is_file):
            root.stat()
    except OSError as e:
        raise SelectionError(path=str(root), reason=e.strerror or str(e)) from e

    if is_dir:
        yield from _walk_dir(root)
    elif is_file:
        yield root


def select_files(root: str | Path, accepted_names: Iterable[str]) -> list[Path]:
    """返回 root 下文件名属于 accepted_names 的所有文件（绝对路径）

    匹配只比较文件名，区分大小写；目录部分不参与匹配。
    accepted_names 为空时直接返回空列表。
    """
    names = frozenset(accepted_names)
    if not names:
        return []

    files = [path for path in walk_files(root) if path.name in names]
    logger.debug("Selected %d file(s) under %s", len(files), root)
    return files
