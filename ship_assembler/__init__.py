"""Ship assembler: shuffle part lines, classify them by keyword, and report the loadout."""

from importlib import import_module
from typing import Any

__version__ = "0.1.0"
__all__ = [
    "Category",
    "classify_line",
    "WEAPON_SLOTS",
    "load_lines",
    "PartsFileNotFoundError",
    "PartsFileUnreadableError",
    "ShipAssembly",
    "assemble_ship",
    "render_report",
    "format_weapons",
    "MissingCategoryError",
    "__version__",
]

_EXPORTS = {
    "Category": ("parts", "Category"),
    "classify_line": ("parts", "classify_line"),
    "WEAPON_SLOTS": ("parts", "WEAPON_SLOTS"),
    "load_lines": ("loader", "load_lines"),
    "PartsFileNotFoundError": ("loader", "PartsFileNotFoundError"),
    "PartsFileUnreadableError": ("loader", "PartsFileUnreadableError"),
    "ShipAssembly": ("ship", "ShipAssembly"),
    "assemble_ship": ("ship", "assemble_ship"),
    "render_report": ("report", "render_report"),
    "format_weapons": ("report", "format_weapons"),
    "MissingCategoryError": ("report", "MissingCategoryError"),
}


def __getattr__(name: str) -> Any:
    if name in _EXPORTS:
        module_name, attr_name = _EXPORTS[name]
        module = import_module(f".{module_name}", __name__)
        attr = getattr(module, attr_name)
        globals()[name] = attr
        return attr
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
