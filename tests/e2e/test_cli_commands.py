"""
End-to-End Tests for CLI Commands

Runs the click commands through CliRunner against real evaluation,
practice and quality gate code. No network access is needed.
"""

import json

import pytest
from click.testing import CliRunner

from interview_eval.main import cli


class TestCLICommands:
    """Test CLI commands end-to-end."""

    @pytest.fixture
    def runner(self):
        """CLI runner for testing."""
        return CliRunner()

    @pytest.fixture(autouse=True)
    def installed_config(self, test_config, reset_logging):
        """Route the CLI to the test configuration (log file in a temp dir)."""
        test_config.logging.console_level = "CRITICAL"
        return test_config

    def test_help(self, runner):
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert "interview-eval" in result.output

    def test_evaluate_json(self, runner, strong_answer, reference_answer):
        result = runner.invoke(cli, [
            'evaluate', '-a', strong_answer, '-r', reference_answer,
            '-k', 'microservices', '-k', 'scalability', '-k', 'load balancer',
            '--format', 'json', '--breakdown',
        ])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data['verdict'] in ('strong-hire', 'hire')
        assert data['keyPointsCovered'] == ['microservices', 'scalability', 'load balancer']
        assert data['breakdown']['keywordSource'] == 'curated'
        assert data['breakdown']['keywordCoverage'] == 1.0

    def test_evaluate_from_files(self, runner, temp_dir, strong_answer, reference_answer):
        answer_file = temp_dir / "answer.txt"
        reference_file = temp_dir / "reference.txt"
        answer_file.write_text(strong_answer, encoding="utf-8")
        reference_file.write_text(reference_answer, encoding="utf-8")

        result = runner.invoke(cli, [
            'evaluate', '--answer-file', str(answer_file), '--reference-file', str(reference_file),
        ])

        assert result.exit_code == 0, result.output
        assert "Answer Evaluation" in result.output

    def test_evaluate_blank_answer(self, runner, reference_answer):
        result = runner.invoke(cli, ['evaluate', '-a', '   ', '-r', reference_answer])

        assert result.exit_code == 1
        assert "Please provide an answer before submitting." in result.output

    def test_evaluate_requires_reference(self, runner):
        result = runner.invoke(cli, ['evaluate', '-a', 'an answer'])
        assert result.exit_code == 2
        assert "Missing --reference" in result.output

    def test_keywords(self, runner):
        result = runner.invoke(cli, ['keywords', '-r', 'Kubernetes schedules Docker containers.'])

        assert result.exit_code == 0
        assert result.output.split() == ['kubernetes', 'docker']

    def test_keywords_by_category(self, runner):
        result = runner.invoke(cli, ['keywords', '-r', 'Use Kafka and a Redis cache.', '--by-category'])

        assert result.exit_code == 0
        assert "messaging" in result.output
        assert "kafka" in result.output

    def test_practice_session(self, runner, catalog_file):
        answer = "A cache keeps hashing results close to the database to cut latency."
        result = runner.invoke(
            cli,
            ['practice', '--catalog', str(catalog_file), '--limit', '1', '--seed', '3'],
            input=f"{answer}\n\nq\n",
        )

        assert result.exit_code == 0, result.output
        assert "Answer Evaluation" in result.output
        assert "Practice Summary" in result.output

    def test_practice_empty_catalog(self, runner, temp_dir):
        catalog = temp_dir / "empty.json"
        catalog.write_text("[]", encoding="utf-8")

        result = runner.invoke(cli, ['practice', '--catalog', str(catalog)])

        assert result.exit_code == 0
        assert "No voice-suitable questions" in result.output

    def test_quality_gate_passes(self, runner, blog_file):
        result = runner.invoke(cli, [
            'quality-gate', str(blog_file), '-q', 'Explain caching', '--skip-sources', '--format', 'json',
        ])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data['passed'] is True
        assert data['sources']['checked'] is False

    def test_quality_gate_fails(self, runner, temp_dir, sample_blog_data):
        for key in ('realWorldExample', 'diagram', 'glossary'):
            del sample_blog_data[key]
        path = temp_dir / "thin.json"
        path.write_text(json.dumps(sample_blog_data), encoding="utf-8")

        result = runner.invoke(cli, ['quality-gate', str(path), '-q', 'Explain caching', '--skip-sources'])

        assert result.exit_code == 1
        assert "FAILED" in result.output
        assert "Missing or insufficient diagram" in result.output

    def test_config_show_and_validate(self, runner):
        result = runner.invoke(cli, ['config', 'show', '--format', 'json'])
        assert result.exit_code == 0
        assert json.loads(result.stdout)['evaluation']['keyword_weight'] == 60

        result = runner.invoke(cli, ['config', 'validate'])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output

    def test_config_file_option(self, runner, temp_dir):
        path = temp_dir / "bad.yaml"
        path.write_text(
            "evaluation:\n  keyword_weight: 90\n"
            f"logging:\n  file: {temp_dir / 'cli.log'}\n  console_level: CRITICAL\n",
            encoding="utf-8",
        )

        result = runner.invoke(cli, ['-c', str(path), 'config', 'validate'])

        assert result.exit_code == 1
        assert "weights must sum to 100" in result.output
