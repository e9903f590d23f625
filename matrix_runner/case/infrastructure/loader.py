"""Resolves a ``package.module:callable`` import path to a CaseFunction."""

import importlib

from matrix_runner.case.domain.case_function import CaseFunction
from matrix_runner.case.infrastructure.errors import CaseLoadError


def load_case_function(import_path: str) -> CaseFunction:
    """Import and return the callable named by ``import_path``.

    Raises:
        CaseLoadError: if the path is malformed, the module cannot be imported,
            or the attribute is missing or not callable.
    """
    module_name, sep, attr_name = import_path.partition(":")
    if not sep or not module_name or not attr_name:
        raise CaseLoadError(import_path, reason="expected 'package.module:callable'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise CaseLoadError(import_path, reason=str(exc)) from exc

    fn = getattr(module, attr_name, None)
    if fn is None:
        raise CaseLoadError(
            import_path, reason=f"module '{module_name}' has no attribute '{attr_name}'"
        )
    if not callable(fn):
        raise CaseLoadError(import_path, reason=f"'{attr_name}' is not callable")
    return fn
