"""
techradar CLI integration tests

Runs the subcommands through the same argument parser as the console
script and checks the files they produce.

Run: pytest techradar/tests/integration/ -v
"""
import json

import pytest

from techradar.cli import edit, listing, plot, transfer
from techradar.io import read_collection


def _run(cli_parser, argv):
    args = cli_parser.parse_args(argv)
    runners = {"plot": plot.run, "list": listing.run, "import": transfer.run, "export": transfer.run}
    runners.get(args.command, edit.run)(args)
    return args


# ============================================================================
# PLOT
# ============================================================================

@pytest.mark.integration
def test_plot_bundled_dataset(cli_parser, tmp_path):
    output = tmp_path / "radar.png"
    _run(cli_parser, ["plot", "--output", str(output), "--seed", "1"])
    assert output.exists()


@pytest.mark.integration
def test_plot_filtered_with_selection(cli_parser, collection_file, tmp_path):
    output = tmp_path / "tools.png"
    _run(cli_parser, ["plot", "--input", str(collection_file), "--output", str(output),
                      "--quadrant", "Tools", "--select", "7", "--preset", "presentation"])
    assert output.exists()


@pytest.mark.integration
def test_plot_malformed_input_exits(cli_parser, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("not json", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        _run(cli_parser, ["plot", "--input", str(bad), "--output", str(tmp_path / "x.png")])
    assert excinfo.value.code == 1
    assert not (tmp_path / "x.png").exists()


@pytest.mark.integration
def test_plot_missing_input(cli_parser, tmp_path):
    with pytest.raises(FileNotFoundError):
        _run(cli_parser, ["plot", "--input", str(tmp_path / "missing.json")])


# ============================================================================
# LIST
# ============================================================================

@pytest.mark.integration
def test_list_grouped_output(cli_parser, collection_file, capsys):
    _run(cli_parser, ["list", "--input", str(collection_file), "--ring", "Adopt"])
    out = capsys.readouterr().out
    assert "Technologies (2)" in out
    assert "Languages & Frameworks (1)" in out
    assert "Tools (1)" in out
    assert "Terraform *" in out
    assert "Jenkins" not in out


@pytest.mark.integration
def test_list_tsv(cli_parser, collection_file, tmp_path):
    tsv = tmp_path / "list.tsv"
    _run(cli_parser, ["list", "--input", str(collection_file), "--search", "react", "--tsv", str(tsv)])
    lines = tsv.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3


# ============================================================================
# EDIT
# ============================================================================

@pytest.mark.integration
def test_add_update_remove(cli_parser, collection_file):
    _run(cli_parser, ["add", "--input", str(collection_file), "--name", "Bazel",
                      "--description", "Build system", "--quadrant", "Tools", "--ring", "Trial",
                      "--new", "--moved", "1"])
    technologies = read_collection(collection_file)
    assert technologies[-1] == {
        "name": "Bazel", "quadrant": "Tools", "ring": "Trial", "description": "Build system",
        "isNew": True, "moved": 1, "id": 9,
    }

    _run(cli_parser, ["update", "--input", str(collection_file), "--id", "9",
                      "--ring", "Adopt", "--not-new"])
    bazel = read_collection(collection_file)[-1]
    assert bazel["ring"] == "Adopt"
    assert bazel["isNew"] is False
    assert bazel["name"] == "Bazel"
    assert bazel["moved"] == 1

    _run(cli_parser, ["remove", "--input", str(collection_file), "--id", "9"])
    assert [t["id"] for t in read_collection(collection_file)] == [1, 2, 3, 5, 7, 8]


@pytest.mark.integration
def test_add_requires_description(cli_parser, collection_file):
    before = collection_file.read_text(encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        _run(cli_parser, ["add", "--input", str(collection_file), "--name", "Bazel"])
    assert excinfo.value.code == 2
    assert collection_file.read_text(encoding="utf-8") == before


@pytest.mark.integration
@pytest.mark.parametrize("field", ["--name", "--description"])
def test_update_blank_field_rejected(cli_parser, collection_file, field):
    before = collection_file.read_text(encoding="utf-8")
    with pytest.raises(ValueError, match="is required"):
        _run(cli_parser, ["update", "--input", str(collection_file), "--id", "1", field, "  "])
    assert collection_file.read_text(encoding="utf-8") == before


@pytest.mark.integration
def test_update_unknown_id_keeps_file(cli_parser, collection_file):
    before = read_collection(collection_file)
    _run(cli_parser, ["update", "--input", str(collection_file), "--id", "404", "--name", "X"])
    assert read_collection(collection_file) == before


@pytest.mark.integration
def test_edit_to_separate_output(cli_parser, collection_file, tmp_path):
    output = tmp_path / "out.json"
    _run(cli_parser, ["remove", "--input", str(collection_file), "--id", "1", "--output", str(output)])
    assert len(read_collection(collection_file)) == 6
    assert len(read_collection(output)) == 5


# ============================================================================
# IMPORT / EXPORT
# ============================================================================

@pytest.mark.integration
def test_export_writes_technologies_json(cli_parser, collection_file, tmp_path):
    out_dir = tmp_path / "export"
    _run(cli_parser, ["export", "--input", str(collection_file), "--output-dir", str(out_dir)])
    exported = out_dir / "technologies.json"
    assert json.loads(exported.read_text(encoding="utf-8")) == \
        json.loads(collection_file.read_text(encoding="utf-8"))


@pytest.mark.integration
def test_import_malformed_keeps_target(cli_parser, collection_file, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("not json", encoding="utf-8")
    before = collection_file.read_text(encoding="utf-8")
    with pytest.raises(SystemExit):
        _run(cli_parser, ["import", "--input", str(bad), "--output", str(collection_file)])
    assert collection_file.read_text(encoding="utf-8") == before


@pytest.mark.integration
def test_import_missing_key_empties_target(cli_parser, collection_file, tmp_path):
    doc = tmp_path / "other.json"
    doc.write_text('{"foo": []}', encoding="utf-8")
    _run(cli_parser, ["import", "--input", str(doc), "--output", str(collection_file)])
    assert read_collection(collection_file) == []


@pytest.mark.integration
@pytest.mark.parametrize("document", [
    '{"technologies": 5}',
    '{"technologies": [{"name": "X", "quadrant": "Tools", "ring": "Adopt"}]}',
    '{"technologies": [{"id": 1, "name": "X", "quadrant": "Build", "ring": "Adopt",'
    ' "description": "", "isNew": false, "moved": 0}]}',
    '{"technologies": [{"id": 1, "name": "X", "quadrant": "Tools", "ring": "Adopt",'
    ' "description": "", "isNew": false, "moved": 2}]}',
])
def test_import_unusable_record_keeps_target(cli_parser, collection_file, tmp_path, document):
    doc = tmp_path / "other.json"
    doc.write_text(document, encoding="utf-8")
    before = collection_file.read_text(encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        _run(cli_parser, ["import", "--input", str(doc), "--output", str(collection_file)])
    assert excinfo.value.code == 1
    assert collection_file.read_text(encoding="utf-8") == before


@pytest.mark.integration
def test_import_non_utf8_keeps_target(cli_parser, collection_file, tmp_path):
    doc = tmp_path / "latin1.json"
    doc.write_bytes(b'{"technologies": [{"name": "Caf\xe9"}]}')
    before = collection_file.read_text(encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        _run(cli_parser, ["import", "--input", str(doc), "--output", str(collection_file)])
    assert excinfo.value.code == 1
    assert collection_file.read_text(encoding="utf-8") == before


@pytest.mark.integration
def test_plot_non_utf8_input_exits(cli_parser, tmp_path):
    doc = tmp_path / "latin1.json"
    doc.write_bytes(b'\xff\xfe{}')
    with pytest.raises(SystemExit) as excinfo:
        _run(cli_parser, ["plot", "--input", str(doc), "--output", str(tmp_path / "x.png")])
    assert excinfo.value.code == 1
