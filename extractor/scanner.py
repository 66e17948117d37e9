"""逐行扫描，提取包含汉字的双引号字符串

两段式匹配：
1. 行过滤: 第一个 ``"`` 之前出现 ``/`` 或 ``#`` 的行视为注释行，整行丢弃；
   其余行必须含有 ``"...汉字..."`` 形式的子串。
2. 条目提取: 从通过过滤的行中取出至多 N 个 ``"...汉字..."`` 子串（贪婪匹配，
   含两端引号）。

匹配是纯词法的，不解析宿主语言语法；贪婪匹配会把同一行内的多个字面量
合并为从第一个引号到最后一个引号的一个条目。下游依赖这一输出形态。
"""

from __future__ import annotations

import itertools
import logging
import re
from collections.abc import Iterator
from pathlib import Path

from .config import DEFAULT_MAX_LINE_BYTES, DEFAULT_MAX_PER_LINE
from .exceptions import ScanError

logger = logging.getLogger(__name__)

# Unicode Script=Han 的全部码位区间 (Scripts.txt, Unicode 15.1)
HAN = (
    "\u2e80-\u2e99"
    "\u2e9b-\u2ef3"
    "\u2f00-\u2fd5"
    "\u3005"
    "\u3007"
    "\u3021-\u3029"
    "\u3038-\u303b"
    "\u3400-\u4dbf"
    "\u4e00-\u9fff"
    "\uf900-\ufa6d"
    "\ufa70-\ufad9"
    "\U00016fe2-\U00016fe3"
    "\U00016ff0-\U00016ff1"
    "\U00020000-\U0002a6df"
    "\U0002a700-\U0002b739"
    "\U0002b740-\U0002b81d"
    "\U0002b820-\U0002cea1"
    "\U0002ceb0-\U0002ebe0"
    "\U0002ebf0-\U0002ee5d"
    "\U0002f800-\U0002fa1d"
    "\U00030000-\U0003134a"
    "\U00031350-\U000323af"
)

LINE_PATTERN = re.compile(f'^[^/#]*".*[{HAN}]+.*"')
CANDIDATE_PATTERN = re.compile(f'".*[{HAN}]+.*"')
HAN_CHAR = re.compile(f"[{HAN}]")


def is_han(char: str) -> bool:
    """判断单个字符是否属于 Han 文字"""
    return HAN_CHAR.fullmatch(char) is not None


def _split_incomplete(chunk: bytes) -> tuple[bytes, bytes]:
    """把结尾处不完整的 UTF-8 多字节序列切出来，返回 (完整部分, 残余字节)"""
    for i in range(len(chunk) - 1, max(len(chunk) - 4, -1), -1):
        byte = chunk[i]
        if byte & 0xC0 == 0x80:
            continue
        if byte >= 0xF0:
            needed = 4
        elif byte >= 0xE0:
            needed = 3
        elif byte >= 0xC0:
            needed = 2
        else:
            needed = 1
        if len(chunk) - i < needed:
            return chunk[:i], chunk[i:]
        break
    return chunk, b""


def iter_lines(fh, max_line_bytes: int = DEFAULT_MAX_LINE_BYTES) -> Iterator[bytes]:
    """从二进制文件对象按行读取，去掉 ``\\n`` / ``\\r\\n`` 结尾

    超过 max_line_bytes 的行会被切成多段，每段单独产出。
    切分点落在 UTF-8 字符边界上，被截断的多字节字符移到下一段开头。
    """
    carry = b""
    while True:
        chunk = carry + fh.readline(max_line_bytes - len(carry))
        carry = b""
        if not chunk:
            return
        if chunk.endswith(b"\n"):
            chunk = chunk[:-1]
            if chunk.endswith(b"\r"):
                chunk = chunk[:-1]
        elif len(chunk) >= max_line_bytes:
            head, tail = _split_incomplete(chunk)
            if head:
                chunk, carry = head, tail
        yield chunk


def scan_line(line: str, limit: int = DEFAULT_MAX_PER_LINE) -> list[str]:
    """返回单行中的候选条目；注释行或不含汉字字面量的行返回空列表"""
    if not LINE_PATTERN.match(line):
        return []
    matches = CANDIDATE_PATTERN.finditer(line)
    return [m.group(0) for m in itertools.islice(matches, limit)]


def scan_file(
    path: str | Path,
    *,
    max_line_bytes: int = DEFAULT_MAX_LINE_BYTES,
    limit: int = DEFAULT_MAX_PER_LINE,
) -> Iterator[str]:
    """按文件顺序惰性产出文件中的候选条目

    非法 UTF-8 的行按不匹配处理，不中断扫描。

    Raises:
        ScanError: 文件无法打开或读取
    """
    try:
        with open(path, "rb") as fh:
            for lineno, raw in enumerate(iter_lines(fh, max_line_bytes), 1):
                if b'"' not in raw:
                    continue
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError:
                    logger.debug("%s:%d: not valid UTF-8, skipped", path, lineno)
                    continue
                yield from scan_line(line, limit)
    except OSError as e:
        raise ScanError(file_path=str(path), reason=e.strerror or str(e)) from e
