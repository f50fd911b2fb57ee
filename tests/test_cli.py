"""
End-to-end tests for the termedit CLI through typer's CliRunner.
"""

import json

from typer.testing import CliRunner

from termedit import __version__
from termedit.main import app

runner = CliRunner()


class TestReadCommands:
    """Test list, get and search output."""

    def test_list(self, sample_file):
        result = runner.invoke(app, ["list", str(sample_file)])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "kernel.logger_level: info",
            "kernel.inet_dist_listen_min: 9100",
            "myapp.port: 8080",
            'myapp.host: "localhost"',
            'myapp.listeners.[1]: "127.0.0.1" 9090',
        ]

    def test_list_prefix_with_all(self, sample_file):
        result = runner.invoke(app, ["list", str(sample_file), "myapp.listeners", "--all"])
        assert result.exit_code == 0
        assert "myapp.listeners.*" in result.output

    def test_list_no_match_is_success(self, sample_file):
        result = runner.invoke(app, ["list", str(sample_file), "absent"])
        assert result.exit_code == 0
        assert result.output == ""

    def test_get_with_line_numbers(self, sample_file):
        result = runner.invoke(app, ["get", str(sample_file), "myapp.port", "-l"])
        assert result.exit_code == 0
        assert result.output.strip() == "7: myapp.port: 8080"

    def test_get_nth(self, sample_file):
        result = runner.invoke(app, ["get", str(sample_file), "myapp.listeners.[1]", "2"])
        assert result.exit_code == 0
        assert result.output.strip() == "myapp.listeners.[1]: 9090"

    def test_line_numbers_from_config(self, sample_file, isolated_home):
        config = isolated_home / ".termedit" / "config.json"
        config.parent.mkdir()
        config.write_text(json.dumps({"output": {"line_numbers": True}}))

        result = runner.invoke(app, ["get", str(sample_file), "myapp.port"])

        assert result.output.strip() == "7: myapp.port: 8080"

    def test_get_no_match_fails(self, sample_file):
        result = runner.invoke(app, ["get", str(sample_file), "myapp.nope"])
        assert result.exit_code == 1

    def test_get_bad_index_shows_usage(self, sample_file):
        result = runner.invoke(app, ["get", str(sample_file), "myapp.port", "first"])
        assert result.exit_code == 2
        assert "Usage" in result.output

    def test_search(self, sample_file):
        result = runner.invoke(app, ["search", str(sample_file), "listen"])
        assert result.exit_code == 0
        assert "kernel.inet_dist_listen_min: 9100" in result.output
        assert "myapp.listeners.[1]" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["list", str(tmp_path / "absent.config")])
        assert result.exit_code == 1

    def test_lex_error(self, tmp_path):
        broken = tmp_path / "broken.config"
        broken.write_text("{a, $}.\n")
        result = runner.invoke(app, ["list", str(broken)])
        assert result.exit_code == 1

    def test_structural_error(self, tmp_path):
        broken = tmp_path / "broken.config"
        broken.write_text("{a, [1}.\n")
        result = runner.invoke(app, ["list", str(broken)])
        assert result.exit_code == 1


class TestEditCommands:
    """Test add, modify and remove with each save destination."""

    def test_modify_in_place(self, sample_file, sample_text):
        result = runner.invoke(app, ["modify", str(sample_file), "myapp.port", "9090"])
        assert result.exit_code == 0
        assert result.output == ""
        assert sample_file.read_text() == sample_text.replace("8080", "9090")

    def test_modify_type_mismatch(self, sample_file, sample_text):
        result = runner.invoke(app, ["modify", str(sample_file), "myapp.host", "example"])
        assert result.exit_code == 1
        assert sample_file.read_text() == sample_text

    def test_modify_force(self, sample_file):
        result = runner.invoke(app, ["modify", str(sample_file), "myapp.host", "example", "--force"])
        assert result.exit_code == 0
        assert "{host, example}" in sample_file.read_text()

    def test_modify_requires_values(self, sample_file):
        result = runner.invoke(app, ["modify", str(sample_file), "myapp.port"])
        assert result.exit_code == 2

    def test_modify_too_many_values(self, sample_file):
        result = runner.invoke(app, ["modify", str(sample_file), "myapp.port", "1", "2"])
        assert result.exit_code == 2
        assert "Usage" in result.output

    def test_remove_to_stdout(self, sample_file, sample_text):
        result = runner.invoke(app, ["remove", str(sample_file), "myapp.port", "--stdout"])
        assert result.exit_code == 0
        assert result.output == sample_text.replace("    {port, 8080},\n", "")
        assert sample_file.read_text() == sample_text

    def test_remove_diff(self, sample_file, sample_text):
        result = runner.invoke(app, ["remove", str(sample_file), "kernel.logger_level", "--diff"])
        assert result.exit_code == 0
        assert "-    {logger_level, info},   % default level" in result.output
        assert sample_file.read_text() == sample_text

    def test_add_to_output_file(self, sample_file, sample_text, tmp_path):
        output = tmp_path / "new.config"
        result = runner.invoke(
            app,
            ["add", str(sample_file), "myapp.listeners", '"198.51.100.1"', "9092", "-o", str(output)],
        )
        assert result.exit_code == 0
        assert sample_file.read_text() == sample_text
        assert '        {"198.51.100.1", 9092}\n' in output.read_text()

    def test_add_not_a_named_list(self, sample_file):
        result = runner.invoke(app, ["add", str(sample_file), "myapp.port", "x"])
        assert result.exit_code == 1

    def test_backup_flag(self, sample_file, isolated_home):
        result = runner.invoke(app, ["remove", str(sample_file), "myapp.servers", "--backup"])
        assert result.exit_code == 0
        backups = list((isolated_home / ".termedit" / "backups").iterdir())
        assert len(backups) == 1

    def test_unchanged_value_leaves_file_alone(self, sample_file, sample_text):
        before = sample_file.stat().st_mtime_ns
        result = runner.invoke(app, ["modify", str(sample_file), "myapp.port", "8080"])
        assert result.exit_code == 0
        assert sample_file.stat().st_mtime_ns == before


class TestGlobalOptions:
    """Test the app callback and utility commands."""

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose_and_quiet_are_accepted(self, sample_file):
        assert runner.invoke(app, ["-v", "list", str(sample_file)]).exit_code == 0
        assert runner.invoke(app, ["-q", "list", str(sample_file)]).exit_code == 0

    def test_plain_diff(self, sample_file):
        result = runner.invoke(app, ["--plain", "modify", str(sample_file), "myapp.port", "1", "-d"])
        assert result.exit_code == 0
        assert "+    {port, 1}," in result.output
