"""Tests for the command-line interface."""

import json

from click.testing import CliRunner

from seo_text_analyzer.cli import main


class TestAnalyzeCommand:
    """Tests for `seo-text analyze`."""

    def test_json_output(self, short_text):
        """Test JSON output from stdin."""
        runner = CliRunner()
        result = runner.invoke(main, ["analyze", "--json", "--seed", "1"], input=short_text)

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["metrics"]["wordCount"] == 9
        assert data["metrics"]["sentenceCount"] == 2
        assert len(data["suggestions"]) == 3

    def test_table_output(self, article_text):
        """Test the rich report."""
        runner = CliRunner()
        result = runner.invoke(main, ["analyze"], input=article_text)

        assert result.exit_code == 0
        assert "Text Metrics" in result.output
        assert "Keyword Suggestions" in result.output
        assert "Suggestions" in result.output

    def test_reads_file(self, tmp_path, short_text):
        """Test reading text from a file argument."""
        path = tmp_path / "article.txt"
        path.write_text(short_text, encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(main, ["analyze", str(path), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["metrics"]["paragraphCount"] == 1

    def test_seed_from_environment(self, article_text):
        """Test that SEO_TEXT_SEED makes output reproducible."""
        runner = CliRunner()
        env = {"SEO_TEXT_SEED": "42"}
        first = runner.invoke(main, ["analyze", "--json"], input=article_text, env=env)
        second = runner.invoke(main, ["analyze", "--json"], input=article_text, env=env)

        assert first.exit_code == 0
        assert first.output == second.output

    def test_invalid_utf8_input(self, tmp_path):
        """Test that undecodable input exits with an error message."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"Caf\xe9 \xff\xfe text.")

        runner = CliRunner()
        result = runner.invoke(main, ["analyze", str(path)])

        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_empty_input(self):
        """Test that blank input exits with an error."""
        runner = CliRunner()
        result = runner.invoke(main, ["analyze"], input="   ")

        assert result.exit_code == 1
        assert "Text is required" in result.output


class TestInsertCommand:
    """Tests for `seo-text insert`."""

    def test_insert_json(self, pets_text):
        """Test JSON output for a successful insertion."""
        runner = CliRunner()
        result = runner.invoke(
            main, ["insert", "--keyword", "nutrition", "--seed", "7", "--json"], input=pets_text
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["inserted"] is True
        assert "nutrition" in data["updatedText"]

    def test_insert_text_output(self, pets_text):
        """Test plain output for a successful insertion."""
        runner = CliRunner()
        result = runner.invoke(main, ["insert", "-k", "nutrition"], input=pets_text)

        assert result.exit_code == 0
        assert "Inserted" in result.output
        assert "nutrition" in result.output

    def test_keyword_already_present(self):
        """Test output when the keyword is already in the text."""
        runner = CliRunner()
        result = runner.invoke(main, ["insert", "-k", "cats"], input="Cats are great pets.")

        assert result.exit_code == 0
        assert "Not inserted" in result.output
        assert "Cats are great pets." in result.output

    def test_blank_keyword(self, pets_text):
        """Test that a blank keyword exits with an error."""
        runner = CliRunner()
        result = runner.invoke(main, ["insert", "-k", "  "], input=pets_text)

        assert result.exit_code == 1
        assert "Keyword is required" in result.output

    def test_keyword_option_required(self, pets_text):
        """Test that --keyword is mandatory."""
        runner = CliRunner()
        result = runner.invoke(main, ["insert"], input=pets_text)

        assert result.exit_code != 0
