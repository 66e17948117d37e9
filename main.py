# -*- coding: utf-8 -*-
"""
中文字符串提取工具
主程序入口

从 config.ini 指定的目录中找到目标文件，提取其中包含汉字的双引号字符串，
去重后写入 output.txt。

使用方法:
    python main.py
    python main.py --config other.ini --output zh.txt --jobs 4 --report
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from extractor import ExtractionResult, ExtractorError, load_config, run
from extractor.config import CONFIG_FILENAME
from i18n import get_available_locales, set_locale, t
from logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="提取源文件中包含中文的字符串")
    parser.add_argument("--config", default=CONFIG_FILENAME, help="配置文件路径 (JSON)")
    parser.add_argument("--output", default=None, help="输出文件路径，默认 output.txt")
    parser.add_argument("-j", "--jobs", type=int, default=None, help="并行扫描的线程数")
    parser.add_argument(
        "--lang",
        default="zh_CN",
        choices=get_available_locales(),
        help="提示信息的语言",
    )
    parser.add_argument("--report", action="store_true", help="输出每个文件的统计表")
    parser.add_argument("--log-file", default=None, help="日志文件路径")
    parser.add_argument("--log-json", action="store_true", help="以 JSON 格式输出日志")
    parser.add_argument("-v", "--verbose", action="store_true", help="详细日志")
    return parser


def render_report(result: ExtractionResult, console: Console) -> None:
    """用表格输出每个文件提取到的条目数"""
    table = Table(title=t("report.title"), expand=False, border_style="green")
    table.add_column(t("report.file"), style="cyan", overflow="fold")
    table.add_column(t("report.count"), justify="right")

    for path in result.files:
        table.add_row(str(path), str(result.per_file.get(path, 0)))
    table.add_section()
    table.add_row(t("report.total"), str(result.count), style="bold")

    console.print(table)


def main(argv: list[str] | None = None) -> int:
    """程序入口，返回进程退出码"""
    args = build_parser().parse_args(argv)

    setup_logging(
        level="DEBUG" if args.verbose else "INFO",
        log_file=args.log_file,
        console_level="DEBUG" if args.verbose else "WARNING",
        json_format=args.log_json,
    )
    set_locale(args.lang)

    console = Console(highlight=False, emoji=False)
    err_console = Console(stderr=True, highlight=False, emoji=False)

    try:
        config = load_config(
            args.config,
            output_path=Path(args.output) if args.output else None,
            workers=args.jobs,
        )
        result = run(config)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt - exiting")
        err_console.print(t("main.interrupted"), markup=False)
        return 130
    except ExtractorError as e:
        logger.debug("Extraction failed", exc_info=True)
        console.print(t("main.failed", error=e), markup=False, soft_wrap=True)
        return 1
    except Exception as e:
        logger.exception("Unhandled exception")
        console.print(t("main.failed", error=e), markup=False, soft_wrap=True)
        return 1

    if args.report:
        render_report(result, err_console)

    console.print(t("main.done", count=result.count), markup=False, soft_wrap=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
