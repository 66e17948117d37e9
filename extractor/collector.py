"""保序去重收集器"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Collector:
    """按首次出现顺序收集不重复的条目

    比较按字符串完全相等（含两端引号）。
    """

    def __init__(self) -> None:
        self._seen: set[str] = set()
        self._items: list[str] = []

    def add(self, candidate: str) -> bool:
        """加入一个条目，返回它是否为首次出现"""
        if candidate in self._seen:
            return False
        self._seen.add(candidate)
        self._items.append(candidate)
        return True

    def extend(self, candidates: Iterable[str]) -> int:
        """依次加入多个条目，返回新加入的数量"""
        return sum(1 for candidate in candidates if self.add(candidate))

    @property
    def items(self) -> tuple[str, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, candidate: object) -> bool:
        return candidate in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)


def collect(streams: Iterable[Iterable[str]]) -> list[str]:
    """把多个条目序列按顺序合并并去重"""
    collector = Collector()
    for stream in streams:
        collector.extend(stream)
    return list(collector)
