"""Loading of shade sail configuration files.

A configuration can fail in three places: the file cannot be read, its
contents are not JSON, or the JSON does not match the schema. Each failure
is raised as a ConfigError whose ``error_type`` names the stage and whose
``details`` carry what a user needs to fix it (line and column for syntax
errors, JSON paths for schema errors).
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from shadesail.application.config.schemas import ShadeSailConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """A configuration that could not be loaded.

    Attributes:
        message: Summary suitable for printing as-is.
        error_type: One of "file_not_found", "permission_denied",
            "file_read_error", "json_parse" or "validation".
        path: The file involved, None for in-memory configurations.
        details: Per-problem dictionaries, see ``load_config``.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location the way it reads in the JSON file.

    Examples:
        >>> _format_json_path(("shade", "measurements", "AB"))
        'shade.measurements.AB'
        >>> _format_json_path(("shade", "anchors", 0, "height"))
        'shade.anchors[0].height'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _schema_error(error: PydanticValidationError, path: Path | None) -> ConfigError:
    details = [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]
    lines = ["Configuration validation failed:"]
    for detail in details:
        where = detail["path"] or "(root)"
        value = detail["value"]
        # Whole sections are too noisy to echo back
        got = "" if value is None or isinstance(value, dict) else f" (got: {value!r})"
        lines.append(f"  - {where}: {detail['message']}{got}")
    return ConfigError(
        message="\n".join(lines),
        error_type="validation",
        path=path,
        details=details,
    )


def _validate(data: Any, path: Path | None = None) -> ShadeSailConfiguration:
    try:
        config = ShadeSailConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _schema_error(e, path) from e
    logger.debug(
        f"Loaded {config.shade.corners}-corner sail config "
        f"(schema {config.schema_version})"
    )
    return config


def _read(path: Path) -> str:
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Could not read config file {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e


def load_config(path: Path) -> ShadeSailConfiguration:
    """Load and validate a configuration file.

    Args:
        path: JSON file with ``schema_version`` and a ``shade`` section.

    Returns:
        The validated configuration. Lengths are still in the file's unit;
        see ``config_to_shade`` for the conversion to millimetres.

    Raises:
        ConfigError: On any failure. Syntax errors carry ``line``,
            ``column`` and ``message`` details; schema errors carry ``path``,
            ``message``, ``value`` and ``error_type`` per problem.
    """
    content = _read(path)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in {path} at line {e.lineno}, "
                f"column {e.colno}: {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> ShadeSailConfiguration:
    """Validate an already-parsed configuration, e.g. an API request body.

    Raises:
        ConfigError: With ``error_type`` "validation".
    """
    return _validate(data)
