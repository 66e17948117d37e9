"""中文字符串提取器

从项目目录中指定文件名的源文件里提取包含汉字的双引号字符串，
去重后写入 output.txt，作为翻译数据库的种子列表。
"""

from .collector import Collector, collect
from .config import ExtractorConfig, load_config, parse_target_files
from .driver import ExtractionResult, extract, run
from .exceptions import (
    ConfigurationError,
    EmptySelectionError,
    ExtractorError,
    OutputError,
    ScanError,
    SelectionError,
)
from .output import write_output
from .scanner import scan_file, scan_line
from .selector import select_files, walk_files

__all__ = [
    "Collector",
    "ConfigurationError",
    "EmptySelectionError",
    "ExtractionResult",
    "ExtractorConfig",
    "ExtractorError",
    "OutputError",
    "ScanError",
    "SelectionError",
    "collect",
    "extract",
    "load_config",
    "parse_target_files",
    "run",
    "scan_file",
    "scan_line",
    "select_files",
    "walk_files",
    "write_output",
]

__version__ = "1.0.0"
