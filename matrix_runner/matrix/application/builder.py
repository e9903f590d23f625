"""Tuple generation for the client matrix."""

import itertools
from collections.abc import Sequence

from matrix_runner.config.domain.client import ClientConfig
from matrix_runner.config.domain.suite import SuiteConfig
from matrix_runner.matrix.application.errors import MatrixBuildError
from matrix_runner.matrix.domain.tuple import ClientTuple

_FIREFOX = "firefox"
_CHROME = "chrome"
_ELECTRON = "electron"


def build_tuples(clients: Sequence[ClientConfig], tuple_size: int) -> list[ClientTuple]:
    """Return every multiset of ``tuple_size`` clients, in config order.

    A client may appear more than once in a tuple (e.g. chrome talking to chrome).

    Raises:
        MatrixBuildError: if clients is empty or tuple_size is not positive.
    """
    if not clients:
        raise MatrixBuildError("no clients configured")
    if tuple_size < 1:
        raise MatrixBuildError(f"tuple size must be at least 1, got {tuple_size}")

    return [
        ClientTuple(clients=combination)
        for combination in itertools.combinations_with_replacement(clients, tuple_size)
    ]


def apply_client_overrides(
    tuples: Sequence[ClientTuple], suite: SuiteConfig
) -> list[ClientTuple]:
    """Substitute the suite-wide Firefox profile and Chrome extension into each client.

    Only clients that already declare a non-empty profile/extension are touched.
    Electron builds of Chrome never receive the extension.
    """
    return [
        ClientTuple(clients=tuple(_override(client, suite) for client in t.clients))
        for t in tuples
    ]


def _override(client: ClientConfig, suite: SuiteConfig) -> ClientConfig:
    if client.browser_name == _FIREFOX and client.profile:
        return client.model_copy(update={"profile": suite.firefox_profile})
    if (
        client.browser_name == _CHROME
        and client.version is not None
        and _ELECTRON not in client.version
        and client.extension
    ):
        return client.model_copy(update={"extension": suite.chrome_extension})
    return client
