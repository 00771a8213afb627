"""Resolve ``package.module:attribute`` targets to Scheme objects."""

import importlib

from draft.errors import SchemeLoadError
from draft.scheme import Scheme


def load_scheme(target: str) -> Scheme:
    """Import ``module:attr`` and return the Scheme it names.

    ``attr`` may be a dotted path, or a callable returning a Scheme.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise SchemeLoadError(target, "expected 'module:attribute'")

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise SchemeLoadError(target, str(e)) from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise SchemeLoadError(target, f"no attribute '{attr}'") from e

    if callable(obj) and not isinstance(obj, Scheme):
        obj = obj()

    if not isinstance(obj, Scheme):
        raise SchemeLoadError(target, f"expected a Scheme, got {type(obj).__name__}")
    return obj
