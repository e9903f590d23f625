"""Tests for tuple generation and client overrides."""

import pytest

from matrix_runner.config.domain.client import ClientConfig
from matrix_runner.config.domain.suite import SuiteConfig
from matrix_runner.matrix.application.builder import apply_client_overrides, build_tuples
from matrix_runner.matrix.application.errors import MatrixBuildError
from matrix_runner.matrix.domain.tuple import ClientTuple

FIREFOX = ClientConfig(browser_name="firefox", version="128", profile="default")
CHROME = ClientConfig(browser_name="chrome", version="126", extension="none")
ELECTRON = ClientConfig(browser_name="chrome", version="30-electron", extension="none")


def _suite() -> SuiteConfig:
    return SuiteConfig(
        name="smoke",
        test_case="pkg.module:run",
        firefox_profile="/profiles/interop",
        chrome_extension="/extensions/recorder.crx",
    )


class TestBuildTuples:
    """Every multiset of clients of the requested size, in config order."""

    def test_size_one_yields_one_tuple_per_client(self) -> None:
        tuples = build_tuples(clients=[FIREFOX, CHROME], tuple_size=1)

        assert [t.clients for t in tuples] == [(FIREFOX,), (CHROME,)]

    def test_size_two_includes_repeated_clients(self) -> None:
        tuples = build_tuples(clients=[FIREFOX, CHROME], tuple_size=2)

        assert [t.clients for t in tuples] == [
            (FIREFOX, FIREFOX),
            (FIREFOX, CHROME),
            (CHROME, CHROME),
        ]

    def test_count_for_three_clients_size_two(self) -> None:
        assert len(build_tuples(clients=[FIREFOX, CHROME, ELECTRON], tuple_size=2)) == 6

    def test_tuple_size_larger_than_client_count(self) -> None:
        tuples = build_tuples(clients=[FIREFOX], tuple_size=3)

        assert [t.size for t in tuples] == [3]

    def test_no_clients_raises(self) -> None:
        with pytest.raises(MatrixBuildError, match="no clients"):
            build_tuples(clients=[], tuple_size=1)

    def test_non_positive_size_raises(self) -> None:
        with pytest.raises(MatrixBuildError, match="tuple size"):
            build_tuples(clients=[FIREFOX], tuple_size=0)


class TestApplyClientOverrides:
    """Suite-wide profile and extension replace the per-client placeholders."""

    def test_firefox_with_profile_gets_suite_profile(self) -> None:
        [t] = apply_client_overrides([ClientTuple(clients=(FIREFOX,))], suite=_suite())

        assert t.clients[0].profile == "/profiles/interop"

    def test_firefox_without_profile_untouched(self) -> None:
        bare = ClientConfig(browser_name="firefox")
        [t] = apply_client_overrides([ClientTuple(clients=(bare,))], suite=_suite())

        assert t.clients[0] == bare

    def test_chrome_with_extension_gets_suite_extension(self) -> None:
        [t] = apply_client_overrides([ClientTuple(clients=(CHROME,))], suite=_suite())

        assert t.clients[0].extension == "/extensions/recorder.crx"

    def test_electron_never_gets_extension(self) -> None:
        [t] = apply_client_overrides([ClientTuple(clients=(ELECTRON,))], suite=_suite())

        assert t.clients[0].extension == "none"

    def test_chrome_without_version_untouched(self) -> None:
        unversioned = ClientConfig(browser_name="chrome", extension="none")
        [t] = apply_client_overrides([ClientTuple(clients=(unversioned,))], suite=_suite())

        assert t.clients[0].extension == "none"

    def test_original_tuples_are_not_modified(self) -> None:
        original = ClientTuple(clients=(FIREFOX, CHROME))

        apply_client_overrides([original], suite=_suite())

        assert original.clients == (FIREFOX, CHROME)
        assert FIREFOX.profile == "default"
