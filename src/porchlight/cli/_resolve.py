"""App import resolution — turns ``"module:attribute"`` into an App.

Shared by ``porchlight run`` and ``porchlight routes``.
"""

import importlib
import inspect

from porchlight.app import App
from porchlight.config import ServerConfig


def resolve_app(import_string: str, config: ServerConfig | None = None) -> App:
    """Resolve an import string to a porchlight App instance.

    Accepts ``"module:attribute"``. When the attribute is omitted it
    defaults to ``"create_app"``.

    The attribute may be an ``App`` or a factory. A factory is called with
    *config* when it accepts a parameter, otherwise with no arguments.
    A ready-made ``App`` ignores *config*.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not an App or a factory
            returning one.
    """
    module_path, _, attr_name = import_string.partition(":")
    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name or "create_app")

    if callable(obj) and not isinstance(obj, App):
        takes_config = bool(inspect.signature(obj).parameters)
        try:
            obj = obj(config) if takes_config else obj()
        except Exception as exc:
            msg = f"Factory {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, App):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a porchlight.App instance"
        raise TypeError(msg)

    return obj
