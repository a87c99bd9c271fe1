"""
Tests for the Markdown / JSON report generator
"""

import json

from redrum.output.report import RedrumReportGenerator


class TestMarkdownReport:
    def test_sections_in_order(self, engine):
        analysis = engine.analyze_word("TEST")
        text = RedrumReportGenerator().render_markdown(analysis)
        headings = [
            '# Hash Analysis of "TEST"',
            "## 1. Full SHA-256 Hash",
            "## 2. Individual Character Hashes",
            "## 3. Frequency Analysis of Full Hash",
            "## 4. Combined Hash Analysis",
            "## 5. Character Shifting Analysis",
        ]
        positions = [text.index(h) for h in headings]
        assert positions == sorted(positions)

    def test_contents(self, engine):
        analysis = engine.analyze_word("TEST")
        text = RedrumReportGenerator().render_markdown(analysis)
        assert f"```\n{analysis.word_digest}\n```" in text
        assert f"Word Hash: `{analysis.word_digest}`" in text
        assert f"Combined Hash: `{analysis.combined_digest}`" in text
        first = analysis.shifts[0]
        assert f"| T | 19 | {first.word_char} | {first.combined_char} |" in text
        for pair in analysis.char_digests:
            assert f"| {pair.character} | {pair.digest} |" in text

    def test_pipe_and_invalid_index_are_escaped(self, engine):
        analysis = engine.analyze_word("A|B")
        text = RedrumReportGenerator().render_markdown(analysis)
        assert "| \\| | - |" in text

    def test_newlines_stay_inside_cells(self, engine):
        analysis = engine.analyze_word("A\nB")
        text = RedrumReportGenerator().render_markdown(analysis)
        shift_table = text.split("## 5. Character Shifting Analysis\n")[1]
        assert shift_table.splitlines()[3].startswith("| \\n | - |")
        assert all(line.startswith("|") for line in shift_table.splitlines())

    def test_frequency_table(self, engine):
        result = engine.analyze_frequency("baab")
        text = RedrumReportGenerator.render_frequency_markdown(result)
        assert text.splitlines()[2:] == ["| a | 2 |", "| b | 2 |"]

    def test_generate_markdown_writes_file(self, engine, tmp_path):
        analysis = engine.analyze_word("TEST")
        path = RedrumReportGenerator().generate_markdown(analysis, tmp_path / "out" / "report.md")
        assert path.read_text(encoding="utf-8").startswith('# Hash Analysis of "TEST"')

    def test_write_text_creates_parents(self, tmp_path):
        path = RedrumReportGenerator.write_text("body\n", tmp_path / "a" / "b" / "out.txt")
        assert path.read_text(encoding="utf-8") == "body\n"


class TestJsonReport:
    def test_structure(self, engine, tmp_path):
        result = engine.analyze("TEST")
        path = RedrumReportGenerator(version="9.9.9").generate_json(result, tmp_path / "report.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["report_metadata"]["tool"] == "redrum"
        assert data["report_metadata"]["version"] == "9.9.9"
        assert data["summary"]["total_findings"] == len(result.findings)
        assert data["analysis"]["word"] == "TEST"
        assert len(data["analysis"]["shifts"]) == 4
        assert data["findings"][0]["severity"] == "INFO"
