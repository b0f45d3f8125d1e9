"""Tests for the demonstration entry point."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from friendship.demo import build_demo_graph, main, run_demo
from friendship.models import Edge, Person
from friendship.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached per process; isolate each demo run."""
    get_settings.cache_clear()
    with patch.dict("os.environ", {}, clear=True):
        yield
    get_settings.cache_clear()


class TestBuildDemoGraph:
    """The demo survives its own duplicate edge attempts."""

    def test_graph_shape(self):
        graph, people = build_demo_graph()

        assert [p.name for p in graph.vertices] == ["Rachel", "Ross", "Ben", "Kramer"]
        assert set(graph.edges) == {
            Edge(Person("Rachel"), Person("Ross")),
            Edge(Person("Ross"), Person("Ben")),
        }
        assert set(people) == {"Rachel", "Ross", "Ben", "Kramer"}

    def test_duplicates_logged_not_raised(self, caplog):
        caplog.set_level(logging.WARNING, logger="friendship.demo")

        build_demo_graph()

        skipped = [r for r in caplog.records if r.getMessage().startswith("Skipping edge")]
        assert len(skipped) == 2


class TestRunDemo:
    def test_distances(self):
        assert run_demo() == [1, 2, 0, -1]


class TestMain:
    """argparse CLI."""

    def test_prints_one_distance_per_line(self, capsys):
        exit_code = main(["--log-level", "error"])

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == ["1", "2", "0", "-1"]

    def test_default_run_keeps_logs_off_stdout(self, capsys):
        """Without flags stdout holds only the distances; logs go to stderr."""
        exit_code = main([])

        captured = capsys.readouterr()
        assert exit_code == 0
        assert captured.out.splitlines() == ["1", "2", "0", "-1"]
        assert "WARNING Skipping edge: Edge already in graph: Ross - Rachel" in captured.err
        assert "INFO Built demo graph with 4 vertices and 2 edges" in captured.err

    def test_log_level_from_environment(self, capsys):
        """FRIENDSHIP_LOG_LEVEL reaches the demo when no flag is given."""
        with patch.dict("os.environ", {"FRIENDSHIP_LOG_LEVEL": "DEBUG"}):
            main([])

        captured = capsys.readouterr()
        assert "DEBUG Added edge Rachel - Ross" in captured.err
        assert captured.out.splitlines() == ["1", "2", "0", "-1"]

    def test_rejects_unknown_log_level(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "loud"])

        assert exc_info.value.code == 2
