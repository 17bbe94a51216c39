# okchain/application/combinators.py
"""
Single-step transforms that adapt ordinary functions to the outcome algebra.

Every combinator takes the pipeline value first, so it slots into a chain
through ``Call``:

    request >> Call(map_, name_trim) >> Call(tee, update_db) >> Call(try_catch, send_email)
"""
from __future__ import annotations

from typing import Any, Callable, Mapping

from okchain.domain.callables import ensure_unary
from okchain.domain.exceptions import ContractViolation, InvalidTags, MalformedOutcome
from okchain.domain.outcome import Failure, Outcome, Success
from okchain.domain.tags import flatten, normalize_tags

TRY_CATCH = "try_catch"
NOT_FOUND = "not_found"

_NO_FUNC = object()


def map_(args: Any, func: Callable[[Any], Any]) -> Success:
    """Lift a function that always succeeds."""
    ensure_unary(func)
    return Success(func(args))


def tee(args: Any, func: Callable[[Any], Any]) -> Success:
    """Run a dead-end function for its side effect and pass the input on."""
    ensure_unary(func)
    func(args)
    return Success(args)


def try_catch(args: Any, func: Callable[[Any], Any]) -> Outcome:
    """Turn a raised exception into ``Failure(("try_catch", exc))``."""
    ensure_unary(func)
    try:
        return Success(func(args))
    except ContractViolation:
        raise
    except Exception as exc:
        return Failure((TRY_CATCH, exc))


def found(args: Any, func: Any = _NO_FUNC) -> Outcome:
    """
    ``Success(value)`` unless the value is ``None`` or ``False``.

    Called as ``found(args, func)`` the value is ``func(args)``; as
    ``found(result)`` it is ``result`` itself.
    """
    if func is _NO_FUNC:
        value = args
    else:
        value = ensure_unary(func)(args)
    if value is None or value is False:
        return Failure(NOT_FOUND)
    return Success(value)


def tag_error(args: Any, func: Callable[[Any], Any], *tags: Any) -> Any:
    return tag_error_outcome(ensure_unary(func)(args), *tags)


def tag_ok(args: Any, func: Callable[[Any], Any], *tags: Any) -> Any:
    return tag_ok_outcome(ensure_unary(func)(args), *tags)


def tag(args: Any, func: Callable[[Any], Any], tags: Mapping[str, Any]) -> Outcome:
    return tag_outcome(ensure_unary(func)(args), tags)


def tag_error_outcome(result: Any, *tags: Any) -> Any:
    """
    ``Failure(reason)`` becomes ``Failure((*tags, reason))``; anything else is returned as is.

    ``tag_error_outcome(Failure(100), "changeset", "user")`` gives
    ``Failure(("changeset", "user", 100))``.
    """
    tag_list = normalize_tags(*tags)
    if isinstance(result, Failure):
        return Failure(flatten(tag_list, result.reason))
    return result


def tag_ok_outcome(result: Any, *tags: Any) -> Any:
    tag_list = normalize_tags(*tags)
    if isinstance(result, Success):
        return Success(flatten(tag_list, result.value))
    return result


def tag_outcome(result: Any, tags: Mapping[str, Any]) -> Outcome:
    """Tag either branch: ``tags`` is ``{"ok": ok_tags, "error": error_tags}``."""
    try:
        ok_tags = normalize_tags(tags["ok"])
        error_tags = normalize_tags(tags["error"])
    except (KeyError, TypeError) as exc:
        raise InvalidTags(f"expected {{'ok': ..., 'error': ...}}, got {tags!r}") from exc
    if isinstance(result, Success):
        return Success(flatten(ok_tags, result.value))
    if isinstance(result, Failure):
        return Failure(flatten(error_tags, result.reason))
    raise MalformedOutcome(result)
