"""Tests for katas utility modules."""

import logging


class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefixes_bare_names(self) -> None:
        from katas.utils.logger import get_logger

        assert get_logger("mymodule").name == "katas.mymodule"

    def test_keeps_package_names(self) -> None:
        from katas.utils.logger import get_logger

        assert get_logger("katas").name == "katas"
        assert get_logger("katas.builder").name == "katas.builder"

    def test_returns_stdlib_logger(self) -> None:
        from katas.utils import get_logger

        assert isinstance(get_logger(__name__), logging.Logger)

    def test_similar_prefix_is_namespaced(self) -> None:
        """A name that merely starts with 'katas' still gets the prefix."""
        from katas.utils.logger import get_logger

        assert get_logger("katasfoo").name == "katas.katasfoo"
