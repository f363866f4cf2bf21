"""Detection of the request-decoration mechanism the host client supports.

httpx clients can be decorated per request in two ways, depending on the
release installed:

- through the `event_hooks` mapping of request/response hook lists
- through the single `auth` slot, which accepts a callable

When neither is usable, signing falls back to wrapping the transport
(see `oauth1_client_core.transport`).

The decision is computed once per process by `get_capability_decision()`.
`OAUTH1_CLIENT_DECORATION=wrapping` forces the transport strategy;
`interceptor` asks for the interceptor strategy and is honoured only when the
probe found a usable mechanism.
"""

import enum
import importlib
import inspect
import logging
from dataclasses import dataclass
from threading import Lock

import httpx

from oauth1_client_core.auth.credentials import CredentialResolver

logger = logging.getLogger(__name__)

INTERCEPTOR_TYPE_NAME = "httpx.Auth"

DECORATION_ENV_VAR = "OAUTH1_CLIENT_DECORATION"


class RegistrationShape(enum.Enum):
    """How an interceptor is registered on a client."""

    EVENT_HOOKS = "event_hooks"  # list-based: {"request": [hook, ...]}
    AUTH_SLOT = "auth"  # single fixed slot
    UNAVAILABLE = "unavailable"


class DecorationMode(str, enum.Enum):
    """Strategy override read from the environment."""

    AUTO = "auto"
    INTERCEPTOR = "interceptor"
    WRAPPING = "wrapping"


@dataclass(frozen=True)
class CapabilityDecision:
    """Which decoration mechanism clients are built with."""

    interceptors_supported: bool
    registration_shape: RegistrationShape

    @property
    def uses_interceptor(self) -> bool:
        return self.interceptors_supported and self.registration_shape is not RegistrationShape.UNAVAILABLE


WRAPPING_ONLY = CapabilityDecision(interceptors_supported=False, registration_shape=RegistrationShape.UNAVAILABLE)


def detect_interceptor_support(type_name: str = INTERCEPTOR_TYPE_NAME) -> bool:
    """Return whether the dotted type name can be loaded.

    Never raises: a missing module or attribute simply means the mechanism
    is not there.
    """
    module_name, _, attr = type_name.rpartition(".")
    if not module_name:
        logger.debug(f"Interceptor type {type_name!r} is not a dotted name")
        return False
    try:
        module = importlib.import_module(module_name)
    except (ImportError, ValueError, TypeError):
        logger.debug(f"Interceptor type {type_name} not available: module {module_name} not importable")
        return False
    return inspect.isclass(getattr(module, attr, None))


def _has_writable_property(client_class: type, name: str) -> bool:
    attr = inspect.getattr_static(client_class, name, None)
    return isinstance(attr, property) and attr.fset is not None


def detect_registration_shape(client_class: type = httpx.Client) -> RegistrationShape:
    """Find the interceptor registration entry point on `client_class`.

    The list-based `event_hooks` property is preferred over the `auth` slot.
    """
    if _has_writable_property(client_class, "event_hooks"):
        return RegistrationShape.EVENT_HOOKS
    if _has_writable_property(client_class, "auth"):
        return RegistrationShape.AUTH_SLOT
    return RegistrationShape.UNAVAILABLE


def _read_decoration_mode() -> DecorationMode:
    # Process environment only; a .env file is never loaded into os.environ here.
    raw = CredentialResolver(load_dotenv=False).resolve(
        env_var_name=DECORATION_ENV_VAR,
        default=DecorationMode.AUTO.value,
        mask_in_logs=False,
    )
    try:
        return DecorationMode(raw.strip().lower())
    except ValueError:
        logger.warning(
            f"Ignoring invalid {DECORATION_ENV_VAR}={raw!r}; expected one of "
            f"{', '.join(m.value for m in DecorationMode)}"
        )
        return DecorationMode.AUTO


def probe_capabilities(
    *,
    type_name: str = INTERCEPTOR_TYPE_NAME,
    client_class: type = httpx.Client,
    mode: DecorationMode = DecorationMode.AUTO,
) -> CapabilityDecision:
    """Run both probes and apply the strategy override.

    Args:
        type_name: Dotted name of the interceptor abstraction type.
        client_class: Client class to inspect for registration entry points.
        mode: Strategy override.

    Returns:
        The resulting decision.
    """
    if mode is DecorationMode.WRAPPING:
        logger.debug("Transport wrapping forced by configuration")
        return WRAPPING_ONLY

    supported = detect_interceptor_support(type_name)
    shape = detect_registration_shape(client_class) if supported else RegistrationShape.UNAVAILABLE
    decision = CapabilityDecision(interceptors_supported=supported, registration_shape=shape)

    if supported and not decision.uses_interceptor:
        logger.warning(
            f"{type_name} is available but {client_class.__name__} exposes no interceptor "
            f"registration; falling back to transport wrapping"
        )
    if mode is DecorationMode.INTERCEPTOR and not decision.uses_interceptor:
        logger.warning(f"{DECORATION_ENV_VAR}=interceptor requested but not supported; using transport wrapping")

    logger.debug(
        f"OAuth1 decoration capability: interceptors_supported={supported}, registration_shape={shape.value}"
    )
    return decision


_decision: CapabilityDecision | None = None
_decision_lock = Lock()


def get_capability_decision() -> CapabilityDecision:
    """Return the process-wide decision, computing it on first use.

    Safe under concurrent first access; later calls read the cached value
    without locking.
    """
    global _decision

    decision = _decision
    if decision is not None:
        return decision

    with _decision_lock:
        if _decision is None:
            _decision = probe_capabilities(mode=_read_decoration_mode())
        return _decision


def _reset_capability_decision() -> None:
    """Forget the cached decision. Test helper only."""
    global _decision

    with _decision_lock:
        _decision = None
