from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import (
    Any,
    Final,
    Generic,
    Literal,
    NoReturn,
    TypeIs,
    TypeVar,
)

S = TypeVar("S", covariant=True)  # Success type  # noqa: PLC0105
F = TypeVar("F", covariant=True)  # Failure type  # noqa: PLC0105
U = TypeVar("U")
G = TypeVar("G")


class Success(Generic[S]):
    """
    The success variant of a `Result`, carrying the payload on `.success`.
    """

    __match_args__ = ("success",)
    __slots__ = ("_value",)

    tag: Final = "success"

    def __iter__(self) -> Iterator[S]:
        yield self._value

    def __init__(self, value: S) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Success({self._value!r})"

    def __eq__(self, other: Any) -> bool:  # noqa: ANN401
        return isinstance(other, Success) and self._value == other._value

    def __ne__(self, other: Any) -> bool:  # noqa: ANN401
        return not (self == other)

    def __hash__(self) -> int:
        return hash((True, self._value))

    @property
    def success(self) -> S:
        return self._value

    def is_success(self) -> Literal[True]:
        return True

    def is_failure(self) -> Literal[False]:
        return False

    def unwrap(self) -> S:
        """
        Returns the contained success payload.

        Examples:
        ```python
        assert success(2).unwrap() == 2
        ```
        """
        return self._value

    def unwrap_failure(self) -> NoReturn:
        raise UnwrapError(self, "Called `Result.unwrap_failure()` on a `Success` value")

    def unwrap_or(self, _: object) -> S:
        return self._value

    def map(self, op: Callable[[S], U]) -> Success[U]:
        """
        Applies `op` to the success payload and wraps the outcome in a new `Success`.

        Examples:
        ```python
        assert success(2).map(lambda n: n * 2) == success(4)
        assert failure("boom").map(lambda n: n * 2) == failure("boom")
        ```
        """
        return Success(op(self._value))

    def map_failure(self, _: object) -> Success[S]:
        return self

    def and_then(self, op: Callable[[S], Result[U, G]]) -> Result[U, G]:
        """
        Chains a result-returning function onto the success payload.

        Examples:
        ```python
        def half(n: int) -> Result[int, str]:
            return success(n // 2) if n % 2 == 0 else failure("odd")

        assert success(4).and_then(half) == success(2)
        assert success(3).and_then(half) == failure("odd")
        ```
        """
        return op(self._value)


class Failure(Generic[F]):
    """
    The failure variant of a `Result`, carrying the payload on `.failure`.
    """

    __match_args__ = ("failure",)
    __slots__ = ("_value",)

    tag: Final = "failure"

    def __iter__(self) -> Iterator[NoReturn]:
        def _iter() -> Iterator[NoReturn]:
            # Failure yields nothing, so iterating it short-circuits comprehensions
            return
            yield

        return _iter()

    def __init__(self, value: F) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Failure({self._value!r})"

    def __eq__(self, other: Any) -> bool:  # noqa: ANN401
        return isinstance(other, Failure) and self._value == other._value

    def __ne__(self, other: Any) -> bool:  # noqa: ANN401
        return not (self == other)

    def __hash__(self) -> int:
        return hash((False, self._value))

    @property
    def failure(self) -> F:
        return self._value

    def is_success(self) -> Literal[False]:
        return False

    def is_failure(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        """
        Raises `UnwrapError`, chained to the underlying exception when there is one.

        The cause is the payload itself when it is an exception, otherwise the attribute
        named by the payload's `kind` (e.g. `StorageError.storage_error`).
        """
        exc = UnwrapError(self, f"Called `Result.unwrap()` on a `Failure` value: {self._value!r}")
        cause = _exception_cause(self._value)
        if cause is not None:
            raise exc from cause
        raise exc

    def unwrap_failure(self) -> F:
        return self._value

    def unwrap_or(self, default: U) -> U:
        return default

    def map(self, _: object) -> Failure[F]:
        return self

    def map_failure(self, op: Callable[[F], G]) -> Failure[G]:
        return Failure(op(self._value))

    def and_then(self, _: object) -> Failure[F]:
        return self


type Result[S, F] = Success[S] | Failure[F]
"""
A `Result` is exactly one of `Success[S]` or `Failure[F]`. Both variants expose a
`tag` attribute (`"success"` or `"failure"`) and support structural pattern matching:

```python
match storage_map.read("token", validate):
    case Success(value):
        ...
    case Failure(error):
        ...
```
"""

SuccessFailure: Final = (Success, Failure)
"""
A tuple of both variants, for `isinstance` checks on values of unknown shape.
"""


class UnwrapError(Exception):
    """
    Exception raised from ``.unwrap_<...>`` calls on the wrong variant.

    The original ``Result`` is kept on ``.result``.
    """

    _result: Result[object, object]

    def __init__(self, result: Result[object, object], message: str) -> None:
        self._result = result
        super().__init__(message)

    @property
    def result(self) -> Result[Any, Any]:
        return self._result


def success(value: U) -> Success[U]:
    return Success(value)


def failure(error: G) -> Failure[G]:
    return Failure(error)


def is_success(result: Result[U, G]) -> TypeIs[Success[U]]:
    """A type guard to check if a result is a Success

    Usage:

    ``` python
    r: Result[int, str] = get_a_result()
    if is_success(r):
        r   # r is of type Success[int]
    elif is_failure(r):
        r   # r is of type Failure[str]
    ```

    """
    return result.is_success()


def is_failure(result: Result[U, G]) -> TypeIs[Failure[G]]:
    """A type guard to check if a result is a Failure"""
    return result.is_failure()


def _exception_cause(payload: object) -> BaseException | None:
    if isinstance(payload, BaseException):
        return payload
    kind = getattr(payload, "kind", None)
    if isinstance(kind, str):
        cause = getattr(payload, kind, None)
        if isinstance(cause, BaseException):
            return cause
    return None
