"""
Tests for pattern matching, the command set and read sessions.
"""

import pytest

from termedit.exceptions import InputError, NoMatchError
from termedit.mutation import EditSession
from termedit.query import Command, MatchMode, compile_pattern
from termedit.schemas import EditOptions


def read(text, command, target="", args=None, **options):
    return EditSession(text, command, target, args, EditOptions(**options)).run()


class TestCompilePattern:
    """Test anchoring and escaping."""

    def test_exact(self):
        pattern = compile_pattern("kernel.logger_level", MatchMode.EXACT)
        assert pattern.search("kernel.logger_level")
        assert not pattern.search("kernel.logger_level_x")

    def test_literal_dot_and_brackets(self):
        """Metacharacters in names match only themselves."""
        pattern = compile_pattern("http.[1]", MatchMode.EXACT)
        assert pattern.search("http.[1]")
        assert not pattern.search("httpx1")

    def test_prefix_and_suffix(self):
        assert compile_pattern("my", MatchMode.PREFIX).search("myapp.port")
        assert not compile_pattern("app", MatchMode.PREFIX).search("myapp.port")
        assert compile_pattern("port", MatchMode.SUFFIX).search("myapp.port")

    def test_substring(self):
        assert compile_pattern("app.po", MatchMode.SUBSTRING).search("myapp.port")

    def test_empty_prefix_matches_everything(self):
        assert compile_pattern("", MatchMode.PREFIX).search("anything")

    def test_regex(self):
        pattern = compile_pattern(r"myapp\.(port|host)", MatchMode.EXACT, regex=True)
        assert pattern.search("myapp.host")
        assert not pattern.search("myapp.servers")


class TestCommand:
    """Test per-command properties."""

    @pytest.mark.parametrize("command,mode", [
        (Command.LIST, MatchMode.PREFIX),
        (Command.SEARCH, MatchMode.SUBSTRING),
        (Command.GET, MatchMode.EXACT),
        (Command.REMOVE, MatchMode.EXACT),
    ])
    def test_modes(self, command, mode):
        assert command.mode is mode

    def test_writes(self):
        assert {command for command in Command if command.writes} == {
            Command.ADD, Command.MODIFY, Command.REMOVE,
        }

    def test_check_args(self):
        with pytest.raises(InputError):
            Command.MODIFY.check_args([])
        with pytest.raises(InputError):
            Command.REMOVE.check_args(["extra"])
        Command.ADD.check_args(["a", "b", "c"])


class TestReadSessions:
    """Test list, get and search end to end over a document."""

    def test_list_everything(self, sample_text):
        result = read(sample_text, Command.LIST)
        assert result.render_records() == [
            "kernel.logger_level: info",
            "kernel.inet_dist_listen_min: 9100",
            "myapp.port: 8080",
            'myapp.host: "localhost"',
            'myapp.listeners.[1]: "127.0.0.1" 9090',
        ]
        assert result.write_required is False
        assert result.text is None

    def test_list_prefix(self, sample_text):
        result = read(sample_text, Command.LIST, "kernel")
        assert [record.name for record in result.records] == [
            "kernel.logger_level",
            "kernel.inet_dist_listen_min",
        ]

    def test_list_all_includes_containers(self, sample_text):
        lines = read(sample_text, Command.LIST, "myapp", show_all=True).render_records()
        assert "myapp.listeners.*" in lines
        assert "myapp.servers.*" in lines
        assert lines[-1] == "myapp.*"

    def test_list_no_match_is_empty(self, sample_text):
        result = read(sample_text, Command.LIST, "nothing")
        assert result.matches == 0
        assert result.records == []

    def test_line_numbers(self, sample_text):
        lines = read(sample_text, Command.GET, "myapp.port").render_records(line_numbers=True)
        assert lines == ["7: myapp.port: 8080"]

    def test_get_exact(self, sample_text):
        result = read(sample_text, Command.GET, "myapp.host")
        assert result.render_records() == ['myapp.host: "localhost"']

    def test_get_is_not_prefix(self, sample_text):
        with pytest.raises(NoMatchError):
            read(sample_text, Command.GET, "myapp.hos")

    def test_get_nth(self):
        text = "{versions, 1, 2, 3}.\n"
        assert read(text, Command.GET, "versions", ["2"]).records[0].values == ["2"]
        assert read(text, Command.GET, "versions", ["3", "1"]).records[0].values == ["3", "1"]

    def test_get_nth_out_of_range(self):
        result = read("{versions, 1, 2, 3}.\n", Command.GET, "versions", ["7"])
        assert result.records[0].values == []
        assert result.render_records() == ["versions:"]

    def test_get_nth_must_be_positive_integer(self):
        with pytest.raises(InputError):
            read("{a, 1}.", Command.GET, "a", ["zero"])
        with pytest.raises(InputError):
            read("{a, 1}.", Command.GET, "a", ["0"])

    def test_search(self, sample_text):
        result = read(sample_text, Command.SEARCH, "listen")
        assert [record.name for record in result.records] == [
            "kernel.inet_dist_listen_min",
            "myapp.listeners.[1]",
        ]

    def test_search_regex(self, sample_text):
        result = read(sample_text, Command.SEARCH, r"\.(port|host)$", regex=True)
        assert [record.name for record in result.records] == ["myapp.port", "myapp.host"]

    def test_invalid_regex(self, sample_text):
        with pytest.raises(InputError):
            read(sample_text, Command.SEARCH, "(", regex=True)

    def test_synthetic_names_are_queryable(self, http_text):
        result = read(http_text, Command.GET, "http.[2]")
        assert result.records[0].values == ['"10.0.0.2"', "81"]

    def test_multiple_matches(self):
        text = "{a, [{dup, 1}, {dup, 2}]}.\n"
        result = read(text, Command.GET, "a.dup")
        assert result.matches == 2
        assert [record.values for record in result.records] == [["1"], ["2"]]
