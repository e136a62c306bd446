# debug.py
from __future__ import annotations
import logging
from typing import Dict

COMPONENTS = ("alphabet", "permutation", "rotor", "stepping", "machine", "config", "cli")


class Debug:
    _root_configured: bool = False          # class-level guard
    _file_handler: logging.Handler | None = None

    def __init__(self, *, log_to: str | None = None) -> None:
        """
        If `log_to` is given, messages also stream to that file.
        Multiple Debug() instances share one logger and one switch map,
        so enabling a component anywhere enables it for every module.
        """
        self.logger = logging.getLogger("ENIGMA")
        if not Debug._root_configured:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(
                "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            ))
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.DEBUG)
            self.logger.propagate = False
            Debug._root_configured = True
        if log_to:
            self.log_to(log_to)

    # the switch map lives on the class so every module sees the same state
    enabled: bool = True
    components: Dict[str, bool] = {c: False for c in COMPONENTS}

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if Debug.enabled and Debug.components.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    def log_to(self, path: str) -> None:
        """Stream messages to *path* as well (replaces any earlier file)."""
        if Debug._file_handler is not None:
            self.logger.removeHandler(Debug._file_handler)
            Debug._file_handler.close()
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        self.logger.addHandler(handler)
        Debug._file_handler = handler

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug.components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug.components[c] = False

    def toggle(self, component: str) -> None:
        self._require(component)
        Debug.components[component] = not Debug.components[component]

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once."""
        Debug.enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return Debug.components.copy()

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in Debug.components:
            raise ValueError(f"No such component: {component!r}")

    # nicety for `print(dbg)`
    def __repr__(self) -> str:
        active = [k for k, v in Debug.components.items() if v]
        return f"<Debug enabled={Debug.enabled} active={active}>"
