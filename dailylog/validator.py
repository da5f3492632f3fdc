# Configuration validation for dailylog

import yaml

from .config import get_config_value, load_global_config


class ValidationResult:
    """Container for validation results."""

    def __init__(self):
        self.errors = []
        self.warnings = []
        self.global_config = None

    @property
    def is_valid(self):
        """Check if configuration is valid (no errors, or no warnings if strict mode)."""
        strict_mode = get_config_value("validation.strict", False)
        return len(self.errors) == 0 and (not strict_mode or len(self.warnings) == 0)

    @property
    def has_issues(self):
        """Check if there are any errors or warnings."""
        return len(self.errors) > 0 or len(self.warnings) > 0


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def validate_configuration():
    """Validate config/dailylog.yaml.

    Returns:
            ValidationResult: Object containing validation results
    """
    result = ValidationResult()

    try:
        result.global_config = load_global_config()
        _validate_sink(result)
    except yaml.YAMLError as e:
        result.errors.append(f"YAML syntax error: {e}")

    return result


def _validate_sink(result):
    """Validate the sink section."""
    if not isinstance(result.global_config, dict):
        result.errors.append("Top level of the config file must be a mapping")
        return

    sink = result.global_config.get("sink") or {}
    if not isinstance(sink, dict):
        result.errors.append("'sink' must be a mapping")
        return

    hour = sink.get("rotation_hour", 0)
    if not _is_int(hour) or not 0 <= hour <= 23:
        result.errors.append(f"Invalid rotation_hour: {hour!r} (should be 0-23)")

    minute = sink.get("rotation_minute", 0)
    if not _is_int(minute) or not 0 <= minute <= 59:
        result.errors.append(f"Invalid rotation_minute: {minute!r} (should be 0-59)")

    max_files = sink.get("max_files", 0)
    if not _is_int(max_files) or max_files < 0:
        result.errors.append(f"Invalid max_files: {max_files!r} (should be >= 0)")

    if "truncate" in sink and not isinstance(sink["truncate"], bool):
        result.warnings.append(f"truncate should be true or false, got {sink['truncate']!r}")

    base_filename = sink.get("base_filename")
    filename_format = sink.get("filename_format")
    if base_filename is not None and not str(base_filename).strip():
        result.errors.append("base_filename is empty")

    if filename_format:
        if base_filename:
            result.warnings.append("Both base_filename and filename_format set; filename_format wins")
        if _is_int(max_files) and max_files > 0:
            result.warnings.append(
                "filename_format with max_files > 0: startup retention scan is disabled, "
                "only the file expiring at each rotation is removed"
            )
