"""
Unit tests for the command line interface.

Commands run in-process through Typer's CliRunner against the schema fixtures.
"""

import json
from pathlib import Path

from typer.testing import CliRunner

from jsonschema_equivalent import __version__
from jsonschema_equivalent.cli import app

FIXTURES = Path(__file__).parent.parent / "fixtures"
PERSON_SCHEMA = FIXTURES / "schemas" / "person.json"
PERSON_INSTANCES = FIXTURES / "instances" / "person.json"

runner = CliRunner()


def write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data))
    return path


class TestOptimizeCommand:
    """Test `jsonschema-equivalent optimize`."""

    def test_optimize_to_file(self, tmp_path):
        """Test writing the optimized schema to a file."""
        output = tmp_path / "out.json"
        result = runner.invoke(app, ["optimize", "--schema", str(PERSON_SCHEMA), "--output", str(output)])

        assert result.exit_code == 0, result.output
        assert "Optimized Schema" in result.output
        assert "Saved optimized schema" in result.output

        optimized = json.loads(output.read_text())
        assert optimized["properties"]["name"] == {"type": "string", "minLength": 2, "maxLength": 50}

    def test_compact_output(self, tmp_path):
        """Test writing compact JSON."""
        schema = write_json(tmp_path / "schema.json", {"type": "string", "minimum": 1})
        output = tmp_path / "out.json"

        result = runner.invoke(app, ["optimize", "-s", str(schema), "-o", str(output), "--compact"])

        assert result.exit_code == 0, result.output
        assert output.read_text() == '{"type": "string"}\n'

    def test_trace_and_diff(self, tmp_path):
        """Test printing the trace table and the diff."""
        schema = write_json(tmp_path / "schema.json", {"type": "string", "minimum": 1})

        result = runner.invoke(app, ["optimize", "-s", str(schema), "--trace", "--diff"])

        assert result.exit_code == 0, result.output
        assert "Trace" in result.output
        assert "minimum" in result.output

    def test_disabled_rule(self, tmp_path):
        """Test disabling a rule from the command line."""
        schema = write_json(tmp_path / "schema.json", {"type": "string", "minimum": 1})
        output = tmp_path / "out.json"

        result = runner.invoke(
            app, ["optimize", "-s", str(schema), "-o", str(output), "-x", "extraneous-keywords"]
        )

        assert result.exit_code == 0, result.output
        assert json.loads(output.read_text()) == {"type": "string", "minimum": 1}

    def test_config_file(self, tmp_path):
        """Test reading optimizer options from a config file."""
        schema = write_json(tmp_path / "schema.json", {"type": "number", "enum": [1, 2]})
        config = write_json(tmp_path / "config.json", {"integer_policy": "literal"})
        output = tmp_path / "out.json"

        result = runner.invoke(app, ["optimize", "-s", str(schema), "-c", str(config), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert json.loads(output.read_text()) == {"type": "number", "enum": [1, 2]}

    def test_unknown_rule_fails(self, tmp_path):
        """Test that an unknown rule id fails the command."""
        schema = write_json(tmp_path / "schema.json", {"type": "string"})

        result = runner.invoke(app, ["optimize", "-s", str(schema), "-x", "no-such-rule"])

        assert result.exit_code == 1
        assert "no-such-rule" in result.output

    def test_invalid_integer_policy_fails(self, tmp_path):
        """Test that an invalid integer policy fails the command."""
        schema = write_json(tmp_path / "schema.json", {"type": "string"})

        result = runner.invoke(app, ["optimize", "-s", str(schema), "--integer-policy", "strict"])

        assert result.exit_code == 1
        assert "Invalid integer policy" in result.output

    def test_invalid_json_fails(self, tmp_path):
        """Test that a malformed schema file fails the command."""
        schema = tmp_path / "schema.json"
        schema.write_text("{")

        result = runner.invoke(app, ["optimize", "-s", str(schema)])

        assert result.exit_code == 1
        assert "Failed to load schema" in result.output


class TestCheckCommand:
    """Test `jsonschema-equivalent check`."""

    def test_equivalent(self):
        """Test checking a schema that stays equivalent."""
        result = runner.invoke(app, ["check", "-s", str(PERSON_SCHEMA), "-i", str(PERSON_INSTANCES)])

        assert result.exit_code == 0, result.output
        assert "Equivalent on all" in result.output

    def test_literal_policy(self, tmp_path):
        """Test checking integral and fractional instances under the literal policy."""
        schema = write_json(tmp_path / "schema.json", {"type": "integer", "enum": [1.0, 2]})
        instances = write_json(tmp_path / "instances.json", [1, 1.0, 2, 2.0, 1.5, 3, "a"])

        result = runner.invoke(
            app, ["check", "-s", str(schema), "-i", str(instances), "--integer-policy", "literal"]
        )

        assert result.exit_code == 0, result.output
        assert "Equivalent on all 7" in result.output

    def test_schema_optimized_to_true(self, tmp_path):
        """Test checking a schema that optimizes to true."""
        schema = write_json(tmp_path / "schema.json", {"additionalProperties": {}})
        instances = write_json(tmp_path / "instances.json", [1, {}, None])

        result = runner.invoke(app, ["check", "-s", str(schema), "-i", str(instances)])

        assert result.exit_code == 0, result.output
        assert "Equivalent on all 3" in result.output

    def test_schema_optimized_to_false(self, tmp_path):
        """Test checking a schema that optimizes to false."""
        schema = write_json(tmp_path / "schema.json", {"type": "string", "enum": [1]})
        instances = write_json(tmp_path / "instances.json", [1, "1"])

        result = runner.invoke(app, ["check", "-s", str(schema), "-i", str(instances)])

        assert result.exit_code == 0, result.output
        assert "Equivalent on all 2" in result.output

    def test_instances_must_be_array(self, tmp_path):
        """Test that instances must be a JSON array."""
        instances = write_json(tmp_path / "instances.json", {"name": "Alice"})

        result = runner.invoke(app, ["check", "-s", str(PERSON_SCHEMA), "-i", str(instances)])

        assert result.exit_code == 1
        assert "JSON array" in result.output

    def test_draft_is_not_an_option(self, tmp_path):
        """Test that the check command has no draft option."""
        instances = write_json(tmp_path / "instances.json", [])

        result = runner.invoke(app, ["check", "-s", str(PERSON_SCHEMA), "-i", str(instances), "-d", "draft4"])

        assert result.exit_code != 0


class TestRulesCommand:
    def test_lists_rules(self):
        """Test listing the rule catalog."""
        result = runner.invoke(app, ["rules"])

        assert result.exit_code == 0, result.output
        assert "Rule Catalog" in result.output
        assert "all-of-flatten" in result.output
        assert "21 rules" in result.output

    def test_marks_disabled(self):
        """Test marking disabled rules in the catalog."""
        result = runner.invoke(app, ["rules", "-x", "not"])

        assert result.exit_code == 0, result.output
        assert "(disabled)" in result.output


class TestMainCallback:
    def test_version(self):
        """Test printing the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"jsonschema-equivalent version {__version__}" in result.output

    def test_no_command_shows_help(self):
        """Test that running without a command shows help."""
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "optimize" in result.output

    def test_verbose(self, tmp_path):
        """Test the verbose flag."""
        schema = write_json(tmp_path / "schema.json", {"type": "string"})

        result = runner.invoke(app, ["-v", "optimize", "-s", str(schema)])

        assert result.exit_code == 0, result.output
