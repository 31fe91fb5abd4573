"""Locate a hermes App from a ``"module:attribute"`` string.

Used by ``hermes run`` and ``hermes routes``.
"""

import importlib
from typing import Any

from hermes.app import App

DEFAULT_ATTRIBUTE = "app"


def _lookup(import_string: str) -> Any:
    module_name, _, attr_path = import_string.partition(":")
    target: Any = importlib.import_module(module_name)
    # "pkg.web:api.router" walks attributes one dot at a time
    for attr in (attr_path or DEFAULT_ATTRIBUTE).split("."):
        target = getattr(target, attr)
    return target


def resolve_app(import_string: str) -> App:
    """Return the App named by *import_string*.

    ``"myapp"`` means ``"myapp:app"``. A callable that is not an App is
    treated as a factory and called without arguments.

    Raises:
        ModuleNotFoundError: The module cannot be imported.
        AttributeError: The attribute path does not exist.
        TypeError: The factory failed, or the result is not a hermes ``App``.
    """
    target = _lookup(import_string)

    if not isinstance(target, App) and callable(target):
        try:
            target = target()
        except Exception as exc:
            msg = f"App factory {import_string!r} failed: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(target, App):
        msg = f"{import_string!r} resolved to {type(target).__name__}, not a hermes.App instance"
        raise TypeError(msg)

    return target
