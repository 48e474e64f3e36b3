"""Typed exceptions, response error translation and the CLI error decorator."""

from __future__ import annotations

import enum
import functools
from typing import Any, Callable, TypeVar

from pydantic import ValidationError as PydanticValidationError
from rich.console import Console

from meshctl.models.common import ErrorCause, ErrorResponse

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class ErrorKind(str, enum.Enum):
    """Closed set of error kinds a store operation can fail with."""

    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    NOT_FOUND = "not_found"
    API = "api"
    HTTP = "http"


class MeshctlError(Exception):
    """Base exception for meshctl."""

    kind: ErrorKind
    exit_code: int = 1


class ConfigurationError(MeshctlError):
    """Unknown resource type, malformed URL or missing settings."""

    kind = ErrorKind.CONFIGURATION
    exit_code = 6


class TransportError(MeshctlError):
    """The request never produced a response (connect, DNS, timeout)."""

    kind = ErrorKind.TRANSPORT
    exit_code = 2

    def __init__(self, error: Exception) -> None:
        self.error = error
        super().__init__(str(error))


class ResourceNotFoundError(MeshctlError):
    """The control plane has no resource with the given identity."""

    kind = ErrorKind.NOT_FOUND
    exit_code = 4

    def __init__(self, resource_type: str, name: str, mesh: str) -> None:
        self.resource_type = resource_type
        self.name = name
        self.mesh = mesh
        super().__init__(
            f"Resource not found: type={resource_type!r} name={name!r} mesh={mesh!r}"
        )


class ApiError(MeshctlError):
    """Structured error returned by the control-plane API."""

    kind = ErrorKind.API
    exit_code = 7

    def __init__(
        self, title: str, details: str, causes: list[ErrorCause] | None = None,
    ) -> None:
        self.title = title
        self.details = details
        self.causes = list(causes or [])
        super().__init__(f"{title} ({details})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return (self.title, self.details, self.causes) == (
            other.title, other.details, other.causes,
        )

    __hash__ = MeshctlError.__hash__


class HttpError(MeshctlError):
    """Unexpected HTTP status without a usable structured payload."""

    kind = ErrorKind.HTTP

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"({status_code}): {body}")


class ResponseDecodeError(HttpError):
    """A successful response whose body is not a valid resource."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(status_code, f"invalid response body: {reason}")


def is_resource_not_found(err: BaseException | None) -> bool:
    return isinstance(err, ResourceNotFoundError)


def _parse_api_error(body: bytes) -> ApiError | None:
    try:
        payload = ErrorResponse.model_validate_json(body)
    except PydanticValidationError:
        return None
    if not payload.title or not payload.details:
        return None
    return ApiError(payload.title, payload.details, payload.causes)


def translate_error(
    status_code: int,
    body: bytes,
    *,
    expected: tuple[int, ...],
    not_found: ResourceNotFoundError | None = None,
) -> None:
    """Raise the error a response maps to, or return if it is a success.

    A 404 becomes *not_found* when one is supplied, whatever the body holds.
    Otherwise a 4xx/5xx body carrying a title and details is raised as
    ``ApiError``; any other status outside *expected* is an ``HttpError``.
    """
    if status_code == 404 and not_found is not None:
        raise not_found
    if status_code // 100 >= 4:
        api_error = _parse_api_error(body)
        if api_error is not None:
            raise api_error
    if status_code not in expected:
        raise HttpError(status_code, body.decode("utf-8", errors="replace"))


def error_handler(func: F) -> F:
    """Decorator that catches MeshctlError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ApiError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            for cause in exc.causes:
                err_console.print(f"  * {cause.field}: {cause.message}")
            raise SystemExit(exc.exit_code)
        except MeshctlError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]

