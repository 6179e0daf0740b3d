"""Configuration loader for pywidget."""
import importlib.util
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from pywidget.exceptions import WidgetConfigError
from pywidget.widget.policy import RenderPolicy

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "pywidget.config.py"

# UPPERCASE config name -> RenderPolicy field
CONFIG_KEYS = {
    "HEAD_ORDER": "head_order",
    "SCRIPT_PLACEMENT": "script_placement",
    "DEFAULT_MEDIA": "default_media",
    "STATIC_CONTENT": "static_content",
}


def build_policy(values: Dict[str, Any], path: str = "") -> RenderPolicy:
    """Validate policy fields, mapping pydantic errors to a WidgetConfigError."""
    try:
        return RenderPolicy.model_validate(values)
    except ValidationError as e:
        errors = {}
        for err in e.errors():
            field_name = ".".join(str(part) for part in err.get("loc", ()))
            msg = err.get("msg", "Invalid value")
            if msg.startswith("Value error, "):
                msg = msg[len("Value error, ") :]
            errors[field_name] = msg
        raise WidgetConfigError("Invalid render policy", errors=errors, path=path) from e


def load_config(path: Path | str | None = None) -> RenderPolicy:
    """
    Load the render policy from a python file.

    If path is provided, loads from there.
    Otherwise, looks for pywidget.config.py in the current working directory.

    Uppercase names listed in CONFIG_KEYS are mapped onto RenderPolicy fields;
    other names are ignored. A missing or unloadable file yields the default
    policy. Values that fail validation raise WidgetConfigError.
    """
    if path is None:
        path = Path.cwd() / DEFAULT_CONFIG_FILENAME
    else:
        path = Path(path)

    if not path.exists():
        return RenderPolicy()

    try:
        spec = importlib.util.spec_from_file_location("pywidget_config", path)
        if spec is None or spec.loader is None:
            return RenderPolicy()

        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
    except Exception as e:
        logger.warning("Failed to load config from %s: %s", path, e)
        return RenderPolicy()

    mapped_config = {}
    for key, field_name in CONFIG_KEYS.items():
        if hasattr(module, key):
            mapped_config[field_name] = getattr(module, key)

    return build_policy(mapped_config, path=str(path))
