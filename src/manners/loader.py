"""Resolve ``module:attribute`` paths to rule sets for the CLI."""

from __future__ import annotations

import importlib
from typing import Any

from manners.coach import is_coach
from manners.config.logging import get_logger
from manners.errors import RuleSetImportError

logger = get_logger(__name__)


def load_rule_set(path: str) -> Any:
    """Import ``package.module:attr.sub`` and return the object it names.

    Raises:
        RuleSetImportError: The path is malformed, the module cannot be
            imported, the attribute is missing, or the object is neither
            a coach nor a list/tuple.
    """
    module_name, sep, attr_path = path.partition(":")
    if not sep or not module_name or not attr_path:
        msg = f"Expected 'module:attribute', got {path!r}"
        raise RuleSetImportError(msg)

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import module {module_name!r}: {exc}"
        raise RuleSetImportError(msg) from exc

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            msg = f"{module_name!r} has no attribute {attr_path!r}"
            raise RuleSetImportError(msg) from exc

    if not (is_coach(obj) or isinstance(obj, (list, tuple))):
        msg = f"{path!r} is a {type(obj).__name__}, not a coach or rule set"
        raise RuleSetImportError(msg)

    logger.debug("rule_set.loaded", path=path)
    return obj
