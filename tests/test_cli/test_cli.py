"""Tests for the flowcolumns CLI commands."""

import json

from click.testing import CliRunner

from flowcolumns.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "multi-column layouts" in result.output

    def test_lists_commands(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert "generate" in result.output
        assert "check" in result.output
        assert "inspect" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------


class TestGenerate:
    def test_basic(self):
        result = CliRunner().invoke(cli, ["generate", "50%", "50%"])
        assert result.exit_code == 0
        assert ".columns > .column:nth-of-type(2n+1) {" in result.output
        assert "float: left;" in result.output

    def test_scope_and_gutter(self):
        result = CliRunner().invoke(
            cli, ["generate", "25% 50% 25%", "--scope", ".row", "--gutter", "30px"]
        )
        assert result.exit_code == 0
        assert ".row > .column:nth-of-type(3n+2) {" in result.output
        assert "padding-right: 20px;" in result.output

    def test_no_base(self):
        result = CliRunner().invoke(cli, ["generate", "100%", "--no-base"])
        assert result.exit_code == 0
        assert "float: left;" not in result.output

    def test_attribute_only(self):
        result = CliRunner().invoke(
            cli, ["generate", "50%", "50%", "--attribute", "--no-structural"]
        )
        assert '.columns > [data-column~="2-1"]' in result.output
        assert "nth-of-type" not in result.output

    def test_fallback_depth(self):
        result = CliRunner().invoke(
            cli,
            ["generate", "50%", "50%", "--no-structural", "--fallback", "--fallback-depth", "2"],
        )
        assert result.exit_code == 0
        assert result.output.count(":first-child") == 4

    def test_legacy(self):
        result = CliRunner().invoke(cli, ["generate", "100%", "320px", "--legacy"])
        assert result.exit_code == 0
        assert "overflow: hidden;" in result.output
        assert "margin-left: -320px;" in result.output

    def test_legacy_mixed_units_fails(self):
        result = CliRunner().invoke(cli, ["generate", "100%", "200px", "2em", "--legacy"])
        assert result.exit_code == 1
        assert "ERROR" in result.output

    def test_parse_error(self):
        result = CliRunner().invoke(cli, ["generate", "wide"])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_invalid_gutter(self):
        result = CliRunner().invoke(cli, ["generate", "100%", "--gutter=-4px"])
        assert result.exit_code == 1
        assert "Invalid options" in result.output

    def test_options_file(self, tmp_path):
        options = tmp_path / "options.json"
        options.write_text(json.dumps({"className": "col", "gutter": "20px"}))
        result = CliRunner().invoke(
            cli, ["generate", "50%", "50%", "--options", str(options)]
        )
        assert result.exit_code == 0
        assert ".columns > .col:nth-of-type(2n+2) {" in result.output
        assert "padding-left: 10px;" in result.output

    def test_flags_override_options_file(self, tmp_path):
        options = tmp_path / "options.json"
        options.write_text(json.dumps({"gutter": "20px"}))
        result = CliRunner().invoke(
            cli, ["generate", "50% 50%", "--options", str(options), "--gutter", "40px"]
        )
        assert "padding-right: 20px;" in result.output

    def test_unknown_option_in_file(self, tmp_path):
        options = tmp_path / "options.json"
        options.write_text(json.dumps({"columnCount": 3}))
        result = CliRunner().invoke(cli, ["generate", "100%", "--options", str(options)])
        assert result.exit_code == 1

    def test_malformed_options_file(self, tmp_path):
        options = tmp_path / "options.json"
        options.write_text("{not json")
        result = CliRunner().invoke(cli, ["generate", "50%", "50%", "--options", str(options)])
        assert result.exit_code == 1
        assert "Invalid options" in result.output

    def test_options_file_must_be_object(self, tmp_path):
        options = tmp_path / "options.json"
        options.write_text(json.dumps([1, 2]))
        result = CliRunner().invoke(cli, ["generate", "50%", "50%", "--options", str(options)])
        assert result.exit_code == 1
        assert "must contain a JSON object" in result.output

    def test_bad_boolean_in_options_file(self, tmp_path):
        options = tmp_path / "options.json"
        options.write_text(json.dumps({"useAttributeSelector": "ture"}))
        result = CliRunner().invoke(cli, ["generate", "100%", "--options", str(options)])
        assert result.exit_code == 1
        assert "expects true or false" in result.output

    def test_bare_number_gutter_is_pixels(self):
        result = CliRunner().invoke(cli, ["generate", "50%", "50%", "--gutter", "30"])
        assert result.exit_code == 0
        assert "padding-right: 15px;" in result.output

    def test_legacy_gutter_unit_mismatch_fails(self):
        result = CliRunner().invoke(
            cli, ["generate", "320px", "100%", "--legacy", "--gutter", "1em"]
        )
        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert "padding-left" not in result.output

    def test_output_file(self, tmp_path):
        out = tmp_path / "columns.css"
        result = CliRunner().invoke(cli, ["generate", "100%", "-o", str(out)])
        assert result.exit_code == 0
        assert ".columns > .column:nth-of-type(1n+1)" in out.read_text()


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


class TestCheck:
    def test_valid(self):
        result = CliRunner().invoke(cli, ["check", "25%", "50%", "25%"])
        assert result.exit_code == 0
        assert "OK: 25% 50% 25% is valid" in result.output

    def test_warning_exits_zero(self):
        result = CliRunner().invoke(cli, ["check", "50%", "30%"])
        assert result.exit_code == 0
        assert "WARNING" in result.output
        assert "Summary: 0 error(s), 1 warning(s), 0 info" in result.output

    def test_error_exits_one(self):
        result = CliRunner().invoke(cli, ["check", "100% 200px 2em", "--legacy"])
        assert result.exit_code == 1
        assert "1 error(s)" in result.output


# ---------------------------------------------------------------------------
# inspect
# ---------------------------------------------------------------------------


class TestInspect:
    def test_geometry_table(self):
        result = CliRunner().invoke(cli, ["inspect", "25% 50% 25%", "--gutter", "30px"])
        assert result.exit_code == 0
        assert "Columns: 3" in result.output
        assert "Gutter: 30px (interval 20px)" in result.output
        assert "padding=0/20px" in result.output
        assert "> .column:nth-of-type(3n+3)" in result.output

    def test_fixed_widths(self):
        result = CliRunner().invoke(cli, ["inspect", "100%", "320px"])
        assert "Fixed widths: 320px" in result.output
        assert "width=calc(100% - 320px)" in result.output
