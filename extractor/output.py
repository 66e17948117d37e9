"""输出文件写入

每个条目占一行，以单个 ``\\n`` 结尾，UTF-8 编码。
先写入同目录下的临时文件，成功后替换目标文件，失败时不留下半成品。
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from .exceptions import OutputError

logger = logging.getLogger(__name__)


def write_output(candidates: Iterable[str], path: str | Path) -> int:
    """写出全部条目，返回写入的行数

    Raises:
        OutputError: 无法创建或写入输出文件
    """
    path = Path(path)
    count = 0
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as e:
        raise OutputError(file_path=str(path), reason=e.strerror or str(e)) from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
            for candidate in candidates:
                fh.write(candidate + "\n")
                count += 1
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except OSError as e:
        try:
            os.unlink(tmp_name)
        except OSError:
            logger.debug("could not remove temp file %s", tmp_name)
        raise OutputError(file_path=str(path), reason=e.strerror or str(e)) from e

    logger.debug("Wrote %d line(s) to %s", count, path)
    return count
