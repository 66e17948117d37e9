"""简体中文翻译表。"""

STRINGS: dict[str, str] = {
    # ── main.py ──
    "main.done": "提取完成，TotalCount: {count}",
    "main.failed": "There are some errors: {error}",
    "main.interrupted": "提取被中断",
    # --report
    "report.title": "提取统计",
    "report.file": "文件",
    "report.count": "条目数",
    "report.total": "合计 (去重后)",
    # ── extractor.exceptions ──
    "exc.extractor_error": "提取失败",
    "exc.config_error": "配置错误",
    "exc.config_missing_file": "找不到配置文件: {path}",
    "exc.config_bad_json": "配置文件不是合法的 JSON: {error}",
    "exc.config_not_object": "配置文件内容必须是 JSON 对象",
    "exc.config_missing_key": "不存在名为{key}的配置或配置为空",
    "exc.config_bad_value": "配置{key}的值必须是字符串",
    "exc.config_invalid": "配置无效: {problems}",
    "exc.selection_error": "遍历目录失败: {path}",
    "exc.empty_selection": "找不到指定的文件，请检查配置",
    "exc.scan_error": "读取文件失败: {path}",
    "exc.output_error": "写入输出文件失败: {path}",
}
