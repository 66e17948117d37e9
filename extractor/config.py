"""提取器配置 (SSOT - 单一事实来源)

配置文件 config.ini 的内容是一个 JSON 对象，识别两个键:

- ``TargetPath``: 遍历的根目录
- ``TargetFile``: 逗号分隔的目标文件名列表

其余可调参数支持从环境变量覆盖。
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from i18n import t as _t

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.ini"
OUTPUT_FILENAME = "output.txt"

# 旧版工具使用的按行读取缓冲大小
DEFAULT_MAX_LINE_BYTES = 4096
DEFAULT_MAX_PER_LINE = 5


def _get_env_int(key: str, default: int) -> int:
    """从环境变量获取整数配置"""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            logger.debug("ignoring non-integer %s=%r", key, value)
    return default


def parse_target_files(raw: str) -> frozenset[str]:
    """解析 TargetFile: 去掉所有空格和制表符，按逗号切分，丢弃空元素"""
    cleaned = raw.replace(" ", "").replace("\t", "")
    return frozenset(name for name in cleaned.split(",") if name)


class ConfigFileModel(BaseModel):
    """config.ini 原始内容校验模型"""

    model_config = ConfigDict(extra="ignore", strict=True)

    TargetPath: str
    TargetFile: str

    @field_validator("TargetPath")
    @classmethod
    def path_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("TargetPath is empty")
        return v

    @field_validator("TargetFile")
    @classmethod
    def names_not_empty(cls, v: str) -> str:
        if not parse_target_files(v):
            raise ValueError("TargetFile lists no file names")
        return v


@dataclass(frozen=True)
class ExtractorConfig:
    """提取器配置类 (不可变)

    可调参数支持通过环境变量覆盖：
    - ZHEXTRACT_OUTPUT: 输出文件路径
    - ZHEXTRACT_MAX_LINE_BYTES: 单行读取上限，超长行被切成多段分别扫描
    - ZHEXTRACT_MAX_PER_LINE: 每行最多提取的条目数
    - ZHEXTRACT_WORKERS: 并行扫描的线程数 (1 表示顺序扫描)
    """

    root_path: Path
    accepted_names: frozenset[str]

    output_path: Path = field(
        default_factory=lambda: Path(os.environ.get("ZHEXTRACT_OUTPUT", OUTPUT_FILENAME))
    )
    max_line_bytes: int = field(
        default_factory=lambda: _get_env_int("ZHEXTRACT_MAX_LINE_BYTES", DEFAULT_MAX_LINE_BYTES)
    )
    max_per_line: int = field(
        default_factory=lambda: _get_env_int("ZHEXTRACT_MAX_PER_LINE", DEFAULT_MAX_PER_LINE)
    )
    workers: int = field(
        default_factory=lambda: _get_env_int("ZHEXTRACT_WORKERS", 1)
    )

    def validate(self) -> list[str]:
        """返回配置中的问题列表，空列表表示配置有效"""
        errors: list[str] = []
        if not self.accepted_names:
            errors.append("accepted_names must not be empty")
        for name in sorted(self.accepted_names):
            if not name.strip():
                errors.append(f"accepted_names contains a whitespace-only entry: {name!r}")
        if self.max_line_bytes < 1:
            errors.append(f"max_line_bytes must be positive, got {self.max_line_bytes}")
        if self.max_per_line < 1:
            errors.append(f"max_per_line must be positive, got {self.max_per_line}")
        if self.workers < 1:
            errors.append(f"workers must be positive, got {self.workers}")
        return errors


def _config_error(exc: ValidationError) -> ConfigurationError:
    """把 pydantic 校验错误转换为指明配置键的 ConfigurationError"""
    first = exc.errors()[0]
    key = str(first["loc"][0]) if first["loc"] else None
    if first["type"] == "string_type":
        return ConfigurationError(_t("exc.config_bad_value", key=key), config_key=key)
    return ConfigurationError(_t("exc.config_missing_key", key=key), config_key=key)


def load_config(path: str | Path = CONFIG_FILENAME, **overrides: object) -> ExtractorConfig:
    """读取并校验配置文件

    Args:
        path: 配置文件路径，默认为工作目录下的 config.ini
        **overrides: 覆盖 ExtractorConfig 的可调参数，值为 None 的项被忽略

    Raises:
        ConfigurationError: 文件缺失、JSON 非法或必需键缺失/为空
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigurationError(_t("exc.config_missing_file", path=path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(_t("exc.config_bad_json", error=e)) from e

    try:
        content = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(_t("exc.config_bad_json", error=e)) from e

    if not isinstance(content, dict):
        raise ConfigurationError(_t("exc.config_not_object"))

    try:
        raw = ConfigFileModel.model_validate(content)
    except ValidationError as e:
        raise _config_error(e) from e

    kwargs = {k: v for k, v in overrides.items() if v is not None}
    config = ExtractorConfig(
        root_path=Path(raw.TargetPath),
        accepted_names=parse_target_files(raw.TargetFile),
        **kwargs,
    )

    problems = config.validate()
    if problems:
        raise ConfigurationError(_t("exc.config_invalid", problems="; ".join(problems)))

    logger.debug(
        "Config loaded | root=%s names=%s workers=%d",
        config.root_path,
        sorted(config.accepted_names),
        config.workers,
    )
    return config
