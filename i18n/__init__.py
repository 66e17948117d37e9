"""提示信息的多语言支持。

用法::

    from i18n import t, set_locale

    set_locale("en_US")
    print(t("main.done", count=42))

缺失的键回退到 zh_CN，仍缺失则返回 ``[key]``。
"""

from __future__ import annotations

import importlib
import logging

logger = logging.getLogger(__name__)

# locale → 翻译表模块
_MODULES: dict[str, str] = {
    "zh_CN": ".zh_CN",
    "en_US": ".en_US",
}

_locale: str = "zh_CN"
_tables: dict[str, dict[str, str]] = {}


def _load_table(locale: str) -> dict[str, str]:
    if locale not in _MODULES:
        raise ValueError(f"Unsupported locale: {locale}")
    return importlib.import_module(_MODULES[locale], __name__).STRINGS


def _table(locale: str) -> dict[str, str]:
    if locale not in _tables:
        _tables[locale] = _load_table(locale)
    return _tables[locale]


def set_locale(locale: str) -> None:
    """设置当前语言，未知 locale 抛出 ValueError"""
    global _locale
    _table(locale)
    _locale = locale


def get_locale() -> str:
    return _locale


def get_available_locales() -> list[str]:
    return list(_MODULES)


def t(key: str, /, **kwargs: object) -> str:
    """取当前语言的提示文本，并用 ``kwargs`` 填充占位符

    Args:
        key: 翻译键，如 ``"exc.scan_error"``。
        **kwargs: 占位符取值，如 ``path="ui.lua"``。
    """
    template = _table(_locale).get(key)

    if template is None and _locale != "zh_CN":
        template = _table("zh_CN").get(key)
        if template is not None:
            logger.debug("i18n fallback: '%s' not in %s, using zh_CN", key, _locale)

    if template is None:
        logger.warning("i18n missing key: '%s' (lang=%s)", key, _locale)
        return f"[{key}]"

    if not kwargs:
        return template
    try:
        return template.format_map(kwargs)
    except KeyError as e:
        logger.warning("i18n format error: key='%s', missing=%s", key, e)
        return template
