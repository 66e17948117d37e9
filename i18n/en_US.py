"""English translation table."""

STRINGS: dict[str, str] = {
    # ── main.py ──
    "main.done": "Extraction complete, TotalCount: {count}",
    "main.failed": "There are some errors: {error}",
    "main.interrupted": "Extraction interrupted",

    # --report
    "report.title": "Extraction summary",
    "report.file": "File",
    "report.count": "Entries",
    "report.total": "Total (unique)",

    # ── extractor.exceptions ──
    "exc.extractor_error": "Extraction failed",
    "exc.config_error": "Configuration error",
    "exc.config_missing_file": "Configuration file not found: {path}",
    "exc.config_bad_json": "Configuration file is not valid JSON: {error}",
    "exc.config_not_object": "Configuration file must contain a JSON object",
    "exc.config_missing_key": "Setting {key} is missing or empty",
    "exc.config_bad_value": "Setting {key} must be a string",
    "exc.config_invalid": "Invalid configuration: {problems}",
    "exc.selection_error": "Failed to traverse: {path}",
    "exc.empty_selection": "No matching files found, please check the configuration",
    "exc.scan_error": "Failed to read file: {path}",
    "exc.output_error": "Failed to write output file: {path}",
}
