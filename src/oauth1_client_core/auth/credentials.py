"""OAuth1 signing credentials and environment-backed resolution.

`OAuth1Credentials` is the immutable value handed to the client factory and
to signers. `CredentialResolver` looks values up from explicit arguments,
environment variables, a `.env` file (python-dotenv) or defaults, in that
order, and is what `OAuth1Credentials.from_env` uses.

Example:
    ```python
    from oauth1_client_core.auth import OAuth1Credentials

    # Explicit values
    credentials = OAuth1Credentials(
        consumer_key="ck",
        consumer_secret="cs",
        access_token="at",
        access_token_secret="ats",
    )

    # From OAUTH1_CONSUMER_KEY, OAUTH1_CONSUMER_SECRET, ... (or a .env file)
    credentials = OAuth1Credentials.from_env()
    ```

Security Considerations:
    - Secrets are excluded from the dataclass repr
    - Resolved values are masked with *** in log messages
"""

import logging
import os
from dataclasses import dataclass, field
from threading import Lock

from dotenv import load_dotenv

from oauth1_client_core.auth.exceptions import CredentialError, CredentialNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "OAUTH1_"


class CredentialResolver:
    """Resolve configuration values from multiple sources.

    Explicit values win over environment variables, which win over defaults.
    The `.env` file is loaded into the environment once, on construction.

    Example:
        ```python
        resolver = CredentialResolver()
        consumer_key = resolver.resolve(env_var_name="OAUTH1_CONSUMER_KEY", required=True)
        mode = resolver.resolve(env_var_name="OAUTH1_CLIENT_DECORATION", default="auto", mask_in_logs=False)
        ```
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize the resolver.

        Args:
            dotenv_path: Path to a .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Whether to load a .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for OAuth1 configuration")
            except Exception as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a single value.

        Args:
            value: Explicit value; used as-is when not None.
            env_var_name: Environment variable to check next.
            default: Fallback when neither of the above is set.
            required: Raise instead of returning None.
            mask_in_logs: Log `***` instead of the resolved value.

        Returns:
            The resolved value, or None if nothing matched and not required.

        Raises:
            CredentialNotFoundError: If `required` and nothing matched.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved {env_var_name or 'value'} from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result


@dataclass(frozen=True)
class OAuth1Credentials:
    """Consumer and access-token credentials used to sign requests.

    Values are opaque strings. Only presence is checked here; whether they
    are valid is up to the signer and the remote service.
    """

    consumer_key: str
    consumer_secret: str = field(repr=False)
    access_token: str
    access_token_secret: str = field(repr=False)

    def __post_init__(self) -> None:
        for name in ("consumer_key", "consumer_secret", "access_token", "access_token_secret"):
            if getattr(self, name) is None:
                raise CredentialError(f"OAuth1 credential '{name}' must not be None")

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_ENV_PREFIX,
        resolver: CredentialResolver | None = None,
    ) -> "OAuth1Credentials":
        """Build credentials from `<prefix>CONSUMER_KEY` and friends.

        Args:
            prefix: Environment variable prefix.
            resolver: Resolver to use; a default one (loading .env) otherwise.

        Raises:
            CredentialNotFoundError: If any of the four values is missing.
        """
        resolver = resolver or CredentialResolver()
        return cls(
            consumer_key=resolver.resolve(env_var_name=f"{prefix}CONSUMER_KEY", required=True),
            consumer_secret=resolver.resolve(env_var_name=f"{prefix}CONSUMER_SECRET", required=True),
            access_token=resolver.resolve(env_var_name=f"{prefix}ACCESS_TOKEN", required=True),
            access_token_secret=resolver.resolve(env_var_name=f"{prefix}ACCESS_TOKEN_SECRET", required=True),
        )
