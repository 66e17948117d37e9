"""提取流程: 选择文件 → 逐文件扫描 → 去重收集 → 写出结果"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from .collector import Collector
from .config import ExtractorConfig
from .exceptions import EmptySelectionError
from .output import write_output
from .scanner import scan_file
from .selector import select_files

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """一次提取的结果"""

    files: list[Path]
    candidates: list[str]
    # 每个文件提取到的条目数（去重前）
    per_file: dict[Path, int] = field(default_factory=dict)

    @property
    def count(self) -> int:
        return len(self.candidates)


def _scan_to_list(path: Path, config: ExtractorConfig) -> list[str]:
    return list(
        scan_file(path, max_line_bytes=config.max_line_bytes, limit=config.max_per_line)
    )


def extract(config: ExtractorConfig) -> ExtractionResult:
    """执行选择、扫描与去重，不写出文件

    并行扫描时结果仍按文件选择顺序合并，输出与顺序扫描一致。

    Raises:
        SelectionError: 遍历目录失败
        EmptySelectionError: 没有匹配的文件
        ScanError: 文件读取失败
    """
    files = select_files(config.root_path, config.accepted_names)
    if not files:
        raise EmptySelectionError(root_path=str(config.root_path))

    logger.info("Scanning %d file(s) under %s", len(files), config.root_path)

    collector = Collector()
    per_file: dict[Path, int] = {}

    if config.workers > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=config.workers) as pool:
            results = pool.map(lambda p: _scan_to_list(p, config), files)
            for path, found in zip(files, results):
                per_file[path] = len(found)
                collector.extend(found)
    else:
        for path in files:
            found = 0
            for candidate in scan_file(
                path, max_line_bytes=config.max_line_bytes, limit=config.max_per_line
            ):
                found += 1
                collector.add(candidate)
            per_file[path] = found

    for path, found in per_file.items():
        logger.debug("%s: %d candidate(s)", path, found)

    return ExtractionResult(files=files, candidates=list(collector), per_file=per_file)


def run(config: ExtractorConfig) -> ExtractionResult:
    """完整执行一次提取并写出输出文件

    输出文件只在提取全部成功后才写出。
    """
    result = extract(config)
    write_output(result.candidates, config.output_path)
    logger.info(
        "Extraction finished | files=%d unique=%d output=%s",
        len(result.files),
        result.count,
        config.output_path,
    )
    return result
