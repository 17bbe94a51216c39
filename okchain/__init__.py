from loguru import logger

from okchain.application.chaining import bind, chain, pipe
from okchain.application.combinators import (
    NOT_FOUND,
    TRY_CATCH,
    found,
    map_,
    tag,
    tag_error,
    tag_error_outcome,
    tag_ok,
    tag_ok_outcome,
    tag_outcome,
    tee,
    try_catch,
)
from okchain.bootstrap import build_executor, default_executor, ok_with
from okchain.domain.bindings import Bindings
from okchain.domain.callables import Call
from okchain.domain.exceptions import (
    BindError,
    ContractViolation,
    EmptySequenceError,
    InvalidCallee,
    InvalidTags,
    MalformedOutcome,
    UnsupportedStep,
)
from okchain.domain.outcome import (
    OK,
    Failure,
    Outcome,
    Success,
    failure,
    is_failure,
    is_success,
    normalize,
    required,
    success,
)
from okchain.domain.patterns import ANY, Literal, Where
from okchain.domain.steps import BindingStep, PlainStep, RecoveryClause, Step

# library default: silent until setup_console_logging() or logger.enable("okchain")
logger.disable("okchain")

__all__ = [
    "ANY",
    "OK",
    "NOT_FOUND",
    "TRY_CATCH",
    "BindError",
    "BindingStep",
    "Bindings",
    "Call",
    "ContractViolation",
    "EmptySequenceError",
    "Failure",
    "InvalidCallee",
    "InvalidTags",
    "Literal",
    "MalformedOutcome",
    "Outcome",
    "PlainStep",
    "RecoveryClause",
    "Step",
    "Success",
    "UnsupportedStep",
    "Where",
    "bind",
    "build_executor",
    "chain",
    "default_executor",
    "failure",
    "found",
    "is_failure",
    "is_success",
    "map_",
    "normalize",
    "ok_with",
    "pipe",
    "required",
    "success",
    "tag",
    "tag_error",
    "tag_error_outcome",
    "tag_ok",
    "tag_ok_outcome",
    "tag_outcome",
    "tee",
    "try_catch",
]
