import logging

from .categorical import expand_categorical
from .catalog import collect_symbols
from .columns import NamedColumns, NonNumericCoercionError
from .config import config
from .expansion import expand
from .formula import Formula, MalformedFormulaError, parse
from .frame import ModelFrame, UnknownVariableError, build_frame
from .matrices import (
    EmptyResultError,
    MissingDataError,
    ModelMatrix,
    build_matrix,
    complete_cases,
    model_matrix,
)
from .model_formula import model_formula
from .operators import InteractionShapeError, UnsupportedArityError
from .parser import ParseError
from .scanner import ScanError
from .terms import Call, Literal, Symbol
from .transforms import UnknownTransformError
from .version import __version__

__all__ = [
    "Call",
    "EmptyResultError",
    "Formula",
    "InteractionShapeError",
    "Literal",
    "MalformedFormulaError",
    "MissingDataError",
    "ModelFrame",
    "ModelMatrix",
    "NamedColumns",
    "NonNumericCoercionError",
    "ParseError",
    "ScanError",
    "Symbol",
    "UnknownTransformError",
    "UnknownVariableError",
    "UnsupportedArityError",
    "build_frame",
    "build_matrix",
    "collect_symbols",
    "complete_cases",
    "config",
    "expand",
    "expand_categorical",
    "model_formula",
    "model_matrix",
    "parse",
    "__version__",
]

_log = logging.getLogger("modelframe")

if not logging.root.handlers:
    _log.setLevel(logging.INFO)
    if len(_log.handlers) == 0:
        handler = logging.StreamHandler()
        _log.addHandler(handler)
