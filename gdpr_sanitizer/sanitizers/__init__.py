"""Sanitization of user and comment PII."""

from .provider import SyntheticValueProvider
from .hooks import HookPoint, SanitizerHooks, load_hook_module
from .progress import ProgressReporter, NullProgress, RichProgressReporter
from .login_generator import UniqueLoginGenerator
from .exclusion import ExclusionResolver
from .engine import SanitizationEngine

__all__ = [
    "SyntheticValueProvider",
    "HookPoint",
    "SanitizerHooks",
    "load_hook_module",
    "ProgressReporter",
    "NullProgress",
    "RichProgressReporter",
    "UniqueLoginGenerator",
    "ExclusionResolver",
    "SanitizationEngine",
]
