# history/__init__.py
import importlib
import pkgutil
from typing import Dict, Type
from .base import History

HISTORY_IMPLS: Dict[str, Type[History]] = {}


def load_histories() -> None:
    global HISTORY_IMPLS
    HISTORY_IMPLS = {}
    package = __name__
    for info in pkgutil.iter_modules(__path__):
        name = info.name
        if name in {"base", "__init__"}:
            continue
        module = importlib.import_module(f"{package}.{name}")
        impl = getattr(module, "HISTORY", None)
        if impl is None:
            continue
        if impl.name in HISTORY_IMPLS:
            raise ValueError(f"Duplicate history name: {impl.name}")
        HISTORY_IMPLS[impl.name] = impl


def make_history(name: str) -> History:
    """Fresh, empty history of the named implementation."""
    if name not in HISTORY_IMPLS:
        raise ValueError(
            f"Unknown history implementation: {name}. "
            f"Available: {', '.join(sorted(HISTORY_IMPLS))}"
        )
    return HISTORY_IMPLS[name]()


load_histories()
