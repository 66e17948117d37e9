"""提取异常模块
定义提取流程中的各类错误，所有错误都是致命的，由 main 统一处理
"""

from __future__ import annotations

from i18n import t as _t


class ExtractorError(Exception):
    """提取异常基类

    所有提取相关的异常都应该继承此类，
    提供统一的异常处理接口。
    """

    def __init__(self, message: str | None = None, details: dict | None = None):
        """初始化提取异常

        Args:
            message: 错误消息
            details: 额外的错误详情（可选）
        """
        if message is None:
            message = _t("exc.extractor_error")
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(ExtractorError):
    """配置错误异常

    配置文件缺失、JSON 格式错误、必需键缺失或为空时抛出
    """

    def __init__(self, message: str | None = None, config_key: str | None = None):
        if message is None:
            message = _t("exc.config_error")
        details = {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key


class SelectionError(ExtractorError):
    """目录遍历异常

    根目录不可读或遍历过程中出错时抛出
    """

    def __init__(
        self,
        message: str | None = None,
        path: str | None = None,
        reason: str | None = None,
    ):
        if message is None:
            message = _t("exc.selection_error", path=path or "")
        details = {}
        if reason:
            details["reason"] = reason
        super().__init__(message, details)
        self.path = path
        self.reason = reason


class EmptySelectionError(ExtractorError):
    """没有匹配到任何目标文件"""

    def __init__(self, message: str | None = None, root_path: str | None = None):
        if message is None:
            message = _t("exc.empty_selection")
        super().__init__(message)
        self.root_path = root_path


class ScanError(ExtractorError):
    """文件读取异常

    打开或读取已匹配文件失败时抛出
    """

    def __init__(
        self,
        message: str | None = None,
        file_path: str | None = None,
        reason: str | None = None,
    ):
        if message is None:
            message = _t("exc.scan_error", path=file_path or "")
        details = {}
        if reason:
            details["reason"] = reason
        super().__init__(message, details)
        self.file_path = file_path
        self.reason = reason


class OutputError(ExtractorError):
    """输出文件写入异常"""

    def __init__(
        self,
        message: str | None = None,
        file_path: str | None = None,
        reason: str | None = None,
    ):
        if message is None:
            message = _t("exc.output_error", path=file_path or "")
        details = {}
        if reason:
            details["reason"] = reason
        super().__init__(message, details)
        self.file_path = file_path
        self.reason = reason
