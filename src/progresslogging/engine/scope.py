"""Ambient progress scopes.

A scope owns one progress id for the extent of a ``with`` block. While it
is active it is the ambient scope of the current context, so nested scopes
and ``log_progress`` calls pick up their parent without passing ids around.

The ambient scope lives in a ContextVar: asyncio tasks get their own copy
(inheriting the scope active when they were created), and new threads start
with no scope unless they are run inside ``contextvars.copy_context()`` or
given ``parent_id`` explicitly.

Lifecycle of one scope id:
- enter: one indeterminate record
- any number of ``log`` updates
- exit: exactly one ``done`` record, also when the body raised
"""

import logging
import numbers
from contextvars import ContextVar, Token
from typing import Any, Callable, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, ValidationError

from progresslogging.engine.emitter import emit
from progresslogging.engine.errors import (
    InvalidProgressValue,
    NoActiveScopeError,
    ScopeStateError,
    UnsupportedOptionError,
)
from progresslogging.identity import ROOT_ID, as_uuid, new_id
from progresslogging.models import Progress

logger = logging.getLogger(__name__)

T = TypeVar("T")

_current_scope: ContextVar[Optional["ProgressScope"]] = ContextVar(
    "progresslogging_scope", default=None
)


class ScopeOptions(BaseModel):
    """Options accepted by with_progress()."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    name: str = ""
    parent_id: Optional[UUID] = None
    logger: Optional[logging.Logger] = None


def parse_progress(value: Any) -> tuple[Optional[float], bool]:
    """Split a reported value into ``(fraction, done)``.

    Accepts a real number, ``None``/NaN (indeterminate) or ``"done"``.
    """
    if isinstance(value, str):
        if value == "done":
            return None, True
        raise InvalidProgressValue(value)
    if value is None:
        return None, False
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidProgressValue(value)
    return float(value), False


class ProgressScope:
    """Handle for one scoped unit of work."""

    def __init__(
        self,
        name: str = "",
        parent_id: Optional[UUID] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.id = new_id()
        self.name = name
        self.logger = logger
        self._parent_override = parent_id
        self.parent_id: UUID = ROOT_ID if parent_id is None else parent_id
        self._token: Optional[Token] = None
        self._entered = False
        self._exited = False

    @property
    def active(self) -> bool:
        """Check if the scope has been entered and not exited yet."""
        return self._entered and not self._exited

    def record(self, fraction: Optional[float] = None, name: Optional[str] = None, done: bool = False) -> Progress:
        """Build a record for this scope (``name`` defaults to the scope name)."""
        return Progress(
            id=self.id,
            parent_id=self.parent_id,
            fraction=fraction,
            name=self.name if name is None else name,
            done=done,
        )

    def log(self, progress: Any = None, name: Optional[str] = None, **fields: Any) -> Progress:
        """Report progress for this scope.

        ``name`` only labels this one record; later records use the scope
        name again.
        """
        if not self.active:
            raise ScopeStateError(f"Scope {self.id} is not active")
        fraction, done = parse_progress(progress)
        return emit(self.record(fraction, name, done), logger=self.logger, **fields)

    def enter(self) -> "ProgressScope":
        """Activate the scope and emit its opening record."""
        if self._entered:
            raise ScopeStateError(f"Scope {self.id} was already entered")
        if self._parent_override is None:
            parent = _current_scope.get()
            self.parent_id = ROOT_ID if parent is None else parent.id
        self._entered = True
        self._token = _current_scope.set(self)
        try:
            emit(self.record(), logger=self.logger)
        except Exception:
            _current_scope.reset(self._token)
            self._exited = True
            raise
        return self

    def exit(self) -> None:
        """Emit the terminal record and restore the previous ambient scope."""
        if not self._entered:
            raise ScopeStateError(f"Scope {self.id} was never entered")
        if self._exited:
            raise ScopeStateError(f"Scope {self.id} was already exited")
        self._exited = True
        try:
            emit(self.record(done=True), logger=self.logger)
        finally:
            try:
                _current_scope.reset(self._token)
            except ValueError:
                # Token made in another context (e.g. exited from a different task).
                logger.warning(f"Scope {self.id} exited outside the context that entered it")
            self._token = None

    def __enter__(self) -> "ProgressScope":
        return self.enter()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.exit()

    async def __aenter__(self) -> "ProgressScope":
        return self.enter()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.exit()

    def __repr__(self) -> str:
        return f"ProgressScope(id={self.id}, parent_id={self.parent_id}, name={self.name!r})"


def with_progress(name: str = "", parent_id: Optional[UUID] = None, **options: Any) -> ProgressScope:
    """Create a scope to use as ``with with_progress(name="load") as scope:``.

    The scope's parent is ``parent_id`` if given, else the ambient scope at
    the time the block is entered, else ROOT_ID.
    """
    try:
        parsed = ScopeOptions(name=name, parent_id=parent_id, **options)
    except ValidationError as e:
        unsupported = [
            str(error["loc"][0]) for error in e.errors() if error["type"] == "extra_forbidden"
        ]
        if unsupported:
            raise UnsupportedOptionError(unsupported, ScopeOptions.model_fields) from None
        raise
    return ProgressScope(parsed.name, parsed.parent_id, parsed.logger)


def enter_scope(name: str = "", parent_id: Optional[UUID] = None, **options: Any) -> ProgressScope:
    """Begin a scope without a ``with`` block; pair with exit_scope()."""
    return with_progress(name, parent_id, **options).enter()


def exit_scope(scope: ProgressScope) -> None:
    """End a scope begun by enter_scope()."""
    scope.exit()


def current_scope() -> Optional[ProgressScope]:
    """Return the ambient scope, if any."""
    return _current_scope.get()


def current_id() -> UUID:
    """Return the ambient scope id, or ROOT_ID outside any scope."""
    scope = _current_scope.get()
    return ROOT_ID if scope is None else scope.id


def log_progress(
    progress: Any = None,
    name: Optional[str] = None,
    *,
    progress_id: Any = None,
    logger: Optional[logging.Logger] = None,
    **fields: Any,
) -> Progress:
    """Report progress for the ambient scope, or for ``progress_id``.

    With ``progress_id`` the record is reported for ``as_uuid(progress_id)``
    under the ambient scope's parent; without it an ambient scope is required.
    """
    scope = _current_scope.get()
    if progress_id is None:
        if scope is None:
            raise NoActiveScopeError()
        return scope.log(progress, name, **fields)

    fraction, done = parse_progress(progress)
    default_name = "" if scope is None else scope.name
    record = Progress(
        id=as_uuid(progress_id),
        parent_id=ROOT_ID if scope is None else scope.parent_id,
        fraction=fraction,
        name=default_name if name is None else name,
        done=done,
    )
    if logger is None and scope is not None:
        logger = scope.logger
    return emit(record, logger=logger, **fields)


def call_with_progress(func: Callable[[UUID], T], name: str = "") -> T:
    """Call ``func(scope_id)`` inside a fresh scope and return its result."""
    with with_progress(name) as scope:
        return func(scope.id)
