"""1Password client — orchestrates session handling, selectors and items.

This is the central class consumed by applications.  It depends on a
:class:`~op_wrap.core.protocols.CommandRunner` injected at construction
time (dependency inversion); when none is given the
:class:`~op_wrap.infra.subprocess_runner.SubprocessRunner` is used.

Session handling
----------------
A client is either *unauthenticated* (no token held) or *authenticated*
(token held; whether it is still valid is left to ``op``).  Before each
:meth:`Client.get` the session is probed with ``op whoami`` and renewed
with ``op signin`` when needed; a failing ``op item get`` triggers one
more sign-in and exactly one retry.

The token is passed to every ``op`` invocation as
``OP_SESSION_<shorthand>``, where *shorthand* is the first dot-separated
segment of the account (``my-team.1password.com`` → ``my-team``).  After
a successful sign-in the same variable is also written to
:data:`os.environ`, so independent ``op`` calls made later by this
process see the session too.  That is the one process-wide side effect
of this module.

A client holds mutable session state without locking: use one client
per thread.
"""

from __future__ import annotations

import json
import os
import shlex
from collections.abc import Sequence
from typing import Any, Final

from op_wrap.core.item import Item
from op_wrap.core.models import CommandResult, Selector, SelectorKind
from op_wrap.core.protocols import CommandRunner
from op_wrap.exceptions import (
    CommandFailed,
    InvalidResponse,
    OpWrapError,
    SigninFailed,
    ToolNotFound,
)
from op_wrap.infra.op_detector import DEFAULT_EXECUTABLE, install_hint
from op_wrap.infra.subprocess_runner import SubprocessRunner
from op_wrap.utils.log import log

SESSION_ENV_PREFIX: Final[str] = "OP_SESSION_"

# Keys ``op whoami --format=json`` reports for a live session.
IDENTITY_FIELDS: Final[tuple[str, ...]] = ("user_uuid", "account_uuid")


def session_env_var(account: str) -> str:
    """Return the session variable name for *account*."""
    return f"{SESSION_ENV_PREFIX}{account.split('.', 1)[0]}"


class Client:
    """Read items from one 1Password account through the ``op`` CLI.

    Parameters
    ----------
    account:
        Account shorthand, sign-in address or ID passed as ``--account``.
    vault:
        Default vault for title lookups.
    runner:
        Any object satisfying the :class:`CommandRunner` protocol.
    executable:
        Name or path of the ``op`` binary.

    Raises
    ------
    ToolNotFound
        When ``op --version`` cannot be run successfully.
    """

    def __init__(
        self,
        account: str,
        vault: str,
        *,
        runner: CommandRunner | None = None,
        executable: str = DEFAULT_EXECUTABLE,
    ) -> None:
        self.account: str = account
        self.vault: str = vault
        self.executable: str = executable
        self._runner: CommandRunner = runner if runner is not None else SubprocessRunner()
        self._token: str | None = None
        self.cli_version: str = self._ensure_cli_present()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def token(self) -> str | None:
        """The session token from the last successful sign-in, if any."""
        return self._token

    @property
    def session_env_var(self) -> str:
        """Name of the environment variable carrying this account's session."""
        return session_env_var(self.account)

    def whoami(self) -> bool:
        """Return whether ``op`` reports a signed-in session.

        Never raises: a failed command, unparsable output or missing
        identity fields all yield ``False``.
        """
        command = self._command("whoami", "--format=json", "--account", self.account)
        try:
            result = self._run(command)
            payload = json.loads(result.stdout)
        except (OpWrapError, ValueError) as exc:
            log.debug("whoami: not signed in (%s)", exc)
            return False

        if not isinstance(payload, dict):
            return False
        return all(key in payload for key in IDENTITY_FIELDS)

    def signin(self) -> bool:
        """Sign in and keep the session token for later commands.

        Returns
        -------
        bool
            Always ``True``; failure raises instead.

        Raises
        ------
        SigninFailed
            When ``op signin`` exits non-zero or prints no token.  The
            previously held token, if any, is kept.
        """
        command = self._command("signin", "--account", self.account, "--raw")
        try:
            result = self._run(command, with_session=False)
        except CommandFailed as exc:
            raise SigninFailed(
                "1Password sign-in failed",
                hint=exc.stderr.strip() or None,
            ) from exc

        token = result.stdout.rstrip()
        if not token:
            raise SigninFailed("1Password sign-in failed", hint="op signin returned no session token.")

        self._token = token
        os.environ[self.session_env_var] = token
        log.info("signed in to %s", self.account)
        return True

    def get(self, *, vault: str | None = None, **criteria: Any) -> Item:
        """Fetch one item by ``title``, ``id`` or ``url``.

        Parameters
        ----------
        vault:
            Overrides the client's vault for ``title`` lookups.
        **criteria:
            Exactly one of ``title``, ``id`` or ``url``.

        Raises
        ------
        SigninFailed
            When a needed sign-in is rejected.
        InvalidSelector
            When *criteria* is empty, ambiguous or malformed.
        CommandFailed
            When ``op item get`` still fails after one re-authentication.
        InvalidResponse
            When ``op`` prints something other than a JSON object.
        """
        self._ensure_signed_in()
        selector = Selector.parse(**criteria)
        command = self._command(
            *self._build_args(selector, vault),
            "--format",
            "json",
            "--account",
            self.account,
        )

        try:
            result = self._run(command)
        except CommandFailed as first_failure:
            log.warning(
                "op item get failed with status %s; signing in again and retrying once",
                first_failure.status,
            )
            self.signin()
            try:
                result = self._run(command)
            except CommandFailed as retry_failure:
                raise retry_failure from first_failure

        return Item(self._decode(result.stdout))

    # ------------------------------------------------------------------
    # Session guard
    # ------------------------------------------------------------------

    def _ensure_signed_in(self) -> None:
        """Sign in unless ``op whoami`` already reports a session."""
        if not self.whoami():
            self.signin()

    def _ensure_cli_present(self) -> str:
        """Run ``op --version`` and return the reported version."""
        try:
            result = self._run(self._command("--version"), with_session=False)
        except CommandFailed as exc:
            raise ToolNotFound(
                "1Password CLI (op) not found",
                hint=install_hint(self.executable),
            ) from exc
        version = result.stdout.strip()
        log.debug("op version %s", version or "unknown")
        return version

    # ------------------------------------------------------------------
    # Command construction
    # ------------------------------------------------------------------

    def _command(self, *args: str) -> list[str]:
        return [self.executable, *args]

    def _build_args(self, selector: Selector, vault: str | None = None) -> list[str]:
        """Translate *selector* into ``op item get`` arguments."""
        if selector.kind is SelectorKind.TITLE:
            return ["item", "get", selector.value, "--vault", vault or self.vault]
        if selector.kind is SelectorKind.ID:
            return ["item", "get", "--id", selector.value]
        return ["item", "get", "--share-link", selector.value]

    def _session_env(self) -> dict[str, str]:
        if self._token is None:
            return {}
        return {self.session_env_var: self._token}

    # ------------------------------------------------------------------
    # Runner delegation (safe boundary)
    # ------------------------------------------------------------------

    def _run(self, command: Sequence[str], *, with_session: bool = True) -> CommandResult:
        """Call the runner and ensure only our exceptions escape."""
        env = self._session_env() if with_session else {}
        try:
            return self._runner.run(command, env)
        except OpWrapError:
            raise
        except Exception as exc:
            raise CommandFailed(
                shlex.join(command),
                -1,
                stderr=f"Unexpected runner error: {exc}",
            ) from exc

    @staticmethod
    def _decode(stdout: str) -> dict[str, Any]:
        """Parse ``op`` JSON output into a dict."""
        try:
            payload = json.loads(stdout)
        except ValueError as exc:
            raise InvalidResponse("Invalid JSON response from 1Password CLI") from exc
        if not isinstance(payload, dict):
            raise InvalidResponse(
                "Invalid JSON response from 1Password CLI",
                hint=f"Expected a JSON object, got {type(payload).__name__}.",
            )
        return payload
