"""Variable completion for LESS-style stylesheets."""

from lesshint.core.session import HintSession, Position
from lesshint.hints.declarations import Declaration, DeclarationScanner
from lesshint.hints.engine import HintList, VariableHintEngine
from lesshint.hints.registry import HintProviderRegistry
from lesshint.host.base import HostAdapter

__version__ = "0.1.0"

__all__ = [
    "Declaration",
    "DeclarationScanner",
    "HintList",
    "HintProviderRegistry",
    "HintSession",
    "HostAdapter",
    "Position",
    "VariableHintEngine",
]
