"""Rule pack loader."""
from __future__ import annotations

import importlib
import importlib.util
import inspect
import logging
import sys
from pathlib import Path

from pagelint.models import Rule

logger = logging.getLogger("pagelint")

# Registration order is report order.
PACK_MODULES = {
    "structure": "pagelint.packs.structure",
    "seo": "pagelint.packs.seo",
    "social": "pagelint.packs.social",
    "headings": "pagelint.packs.headings",
    "images": "pagelint.packs.images",
    "security": "pagelint.packs.security",
    "content": "pagelint.packs.content",
    "structured-data": "pagelint.packs.structured_data",
}


def load_rules(active_packs: list[str]) -> list[Rule]:
    """Load rules from all active packs, in registry order."""
    rules: list[Rule] = []
    for pack_name in PACK_MODULES:
        if pack_name not in active_packs:
            continue
        module = importlib.import_module(PACK_MODULES[pack_name])
        rules.extend(getattr(module, "RULES", []))
    return rules


def load_custom_rules(custom_rules_dir: str, project_dir: str) -> list[Rule]:
    """Load Rule subclasses from .py files in a custom rules directory."""
    root = Path(project_dir) / custom_rules_dir
    if not root.is_dir():
        return []

    rules: list[Rule] = []
    for py_file in sorted(root.glob("*.py")):
        if py_file.name.startswith("_"):
            continue
        try:
            mod_name = f"pagelint_custom.{py_file.stem}"
            spec = importlib.util.spec_from_file_location(mod_name, py_file)
            if spec is None or spec.loader is None:
                continue
            module = importlib.util.module_from_spec(spec)
            sys.modules[mod_name] = module
            spec.loader.exec_module(module)

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                # Rules imported into the file (e.g. a built-in being subclassed) are not custom rules
                if not (
                    isinstance(attr, type)
                    and issubclass(attr, Rule)
                    and attr.__module__ == mod_name
                    and not inspect.isabstract(attr)
                ):
                    continue
                missing = [name for name in ("id", "pack") if not hasattr(attr, name)]
                if missing:
                    logger.warning(
                        "Skipping custom rule %s in %s: missing %s",
                        attr_name, py_file, ", ".join(missing),
                    )
                    continue
                rules.append(attr())
        except Exception:
            logger.exception("Failed to load custom rule from %s", py_file)

    return rules
