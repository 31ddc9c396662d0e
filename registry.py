from __future__ import annotations
from collections import defaultdict
from typing import Any, Dict, List
import importlib
import pkgutil

__all__ = ["REG", "Registry"]

# Packages whose modules call REG.register(...) at import time.
_PLUGIN_PACKAGES = [
    "computations.spectra",
    "computations.tables",
    "computations.invariants",
]


class Registry:

    def __init__(self, plugin_packages: List[str] | None = None) -> None:
        # Example: _data["property"]["nonlinearity"] for the nonlinearity aggregator.
        self._data: Dict[str, Dict[str, Any]] = defaultdict(dict)
        self._plugin_packages = list(plugin_packages or [])
        self._plugins_loaded = False

    def register(self, category: str, key: str, object: Any | None = None) -> Any:
        category_low = category.lower()
        key_low = key.lower()

        def _decorator(target: Any) -> Any:
            self._data[category_low][key_low] = target
            return target

        return _decorator(object) if object is not None else _decorator

    # --------------------------------------------------------------------
    # Lookup helpers
    # --------------------------------------------------------------------

    def get(self, category: str, key: str) -> Any:
        # Return the registered object (raises KeyError if missing).
        self._load_plugins()
        return self._data[category.lower()][key.lower()]

    def keys(self, category: str) -> list[str]:
        # Return a sorted list of all registration keys in *category*.
        self._load_plugins()
        cat = category.lower()
        if cat not in self._data:
            return []
        return sorted(self._data[cat].keys())

    def __contains__(self, category_and_key) -> bool:
        category, key = category_and_key
        self._load_plugins()
        return key.lower() in self._data.get(category.lower(), {})

    # --------------------------------------------------------------------
    # Plugin discovery, deferred until the first lookup so that plugin
    # modules can import each other (and this module) in any order.
    # --------------------------------------------------------------------

    def _load_plugins(self) -> None:
        if self._plugins_loaded:
            return
        self._plugins_loaded = True
        for package_name in self._plugin_packages:
            _import_submodules(package_name)


def _import_submodules(package_name: str) -> None:
    # Recursively import a package and all of its sub-modules.
    try:
        pkg = importlib.import_module(package_name)
    except ModuleNotFoundError:
        return

    pkg_path = getattr(pkg, "__path__", None)
    if not pkg_path:
        return

    for mod_info in pkgutil.walk_packages(pkg_path, package_name + "."):
        importlib.import_module(mod_info.name)


# Global instance shared framework-wide.
REG = Registry(_PLUGIN_PACKAGES)
