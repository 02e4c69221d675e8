from __future__ import annotations

"""
Integration tests for the Analysis Engine.

Runs the complete chain (lex, build, aggregate, query, render) and checks
the AnalysisResult contract for both successful and rejected transcripts.
"""

from pathlib import Path

from dirsizer.core.pipeline.engine import analyze_file, run_analysis


def test_run_analysis_sample(sample_transcript, mock_config_dict):
    result = run_analysis(sample_transcript, mock_config_dict)

    assert result.ok is True
    assert result.error == ""
    assert result.root_size == 48381165
    assert result.directory_count == 4
    assert result.file_count == 10
    assert result.small_directories_total == 95437
    assert result.space_to_free == 8381165
    assert result.deletion_path == "/d"
    assert result.deletion_size == 24933642
    assert result.tree_lines == []
    assert result.summary["has_deletion_candidate"] is True


def test_run_analysis_small_scenario(small_transcript):
    result = run_analysis(small_transcript, {
        "small_directory_limit": 250,
        "disk_capacity": 1000,
        "required_free_space": 850,
    })

    assert result.ok is True
    assert result.root_size == 300
    assert result.small_directories_total == 200
    assert result.space_to_free == 150
    assert result.deletion_path == "/a"
    assert result.deletion_size == 200


def test_run_analysis_without_candidate(small_transcript):
    result = run_analysis(small_transcript, {
        "disk_capacity": 300,
        "required_free_space": 1000,
    })

    assert result.ok is True
    assert result.space_to_free == 1000
    assert result.deletion_path is None
    assert result.deletion_size is None
    assert result.summary["has_deletion_candidate"] is False


def test_run_analysis_empty_transcript():
    result = run_analysis("")

    assert result.ok is True
    assert result.root_size == 0
    assert result.directory_count == 1
    assert result.file_count == 0


def test_run_analysis_reports_first_error_line():
    result = run_analysis("$ cd /\n$ ls\ndir a\n$ cd ..\n$ cd a\n")

    assert result.ok is False
    assert result.error_line == 4
    assert "Cannot move above" in result.error
    assert result.root_size == 0


def test_run_analysis_reports_malformed_line():
    result = run_analysis("$ ls\nfoo bar\n")

    assert result.ok is False
    assert result.error_line == 2
    assert "foo bar" in result.error


def test_run_analysis_renders_and_saves_tree(tmp_path: Path, small_transcript):
    tree_file = tmp_path / "out" / "tree.txt"
    result = run_analysis(small_transcript, {
        "show_tree": True,
        "tree_output_path": str(tree_file),
    })

    assert result.ok is True
    assert result.tree_lines[0] == "/ (dir, size=300)"
    assert result.tree_path == str(tree_file)
    assert tree_file.read_text(encoding="utf-8").splitlines() == result.tree_lines


def test_run_analysis_invalid_config_falls_back(small_transcript):
    result = run_analysis(small_transcript, {"small_directory_limit": "many"})

    assert result.ok is True
    assert result.small_directory_limit == 100000
    assert result.small_directories_total == 500


def test_analyze_file(transcript_file: Path):
    result = analyze_file(str(transcript_file))

    assert result.ok is True
    assert result.source == str(transcript_file)
    assert result.small_directories_total == 95437


def test_analyze_missing_file(tmp_path: Path):
    result = analyze_file(str(tmp_path / "missing.txt"))

    assert result.ok is False
    assert "Cannot read transcript" in result.error


def test_run_analysis_renders_deep_tree():
    depth = 1500
    lines = []
    for i in range(depth):
        lines += ["$ ls", f"dir d{i}", f"$ cd d{i}"]
    lines += ["$ ls", "3 leaf"]

    result = run_analysis("\n".join(lines), {"show_tree": True})

    assert result.ok is True
    assert result.root_size == 3
    assert len(result.tree_lines) == depth + 2


def test_analyze_file_with_invalid_utf8(tmp_path: Path):
    bad = tmp_path / "latin.txt"
    bad.write_bytes(b"10 \xff\xfe\n")

    result = analyze_file(str(bad))

    assert result.ok is False
    assert "Cannot read transcript" in result.error
