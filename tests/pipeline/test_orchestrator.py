"""End-to-end tests for the two-phase pipeline."""

import json
from datetime import datetime, timezone

import pytest

pytestmark = pytest.mark.integration

from grovegrid.contracts import ContractViolation
from grovegrid.ingest import FileStructureError
from grovegrid.model import SliceDataset
from grovegrid.pipeline.orchestrator import PipelineOrchestrator

FIXED_NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def test_two_month_example(run_config):
    output = PipelineOrchestrator(run_config).build(now=FIXED_NOW)
    meta = output.meta

    assert (meta.x_max, meta.y_max) == (2, 2)
    assert meta.value_max == pytest.approx(7.2)
    assert meta.value_min_pos == pytest.approx(3.5)
    assert (meta.size_min, meta.size_max) == (10, 15)
    assert meta.months == ["a", "b"]
    assert meta.generated_at == "2025-03-01T12:00:00+00:00"

    assert output.datasets["a"].heat == [(1, 1, 0.0), (1, 2, 3.5), (2, 1, -1.0), (2, 2, -1.0)]
    assert output.datasets["b"].heat == [(1, 1, -1.0), (1, 2, -1.0), (2, 1, -1.0), (2, 2, 7.2)]


def test_meta_carries_labels_render_settings_and_notes(make_config, write_csv, data_dir, temp_dir):
    write_csv("2025-01.csv", "Row,Tree,Yield,Crown,Variety\n1,1,2,3,Gala\n")
    config = make_config(IN_DIR=str(data_dir), OUT_DIR=str(temp_dir / "out"), TITLE="Orchard")
    meta = PipelineOrchestrator(config).build(now=FIXED_NOW).meta

    assert meta.title == "Orchard"
    assert meta.labels.extras == ["Variety"]
    assert meta.notes["x_axis"] == "Row (1..X)"
    assert meta.notes["value_info"].startswith("Yield:")
    assert meta.zero_color == "#555555"
    assert meta.nodata_color == "#222222"
    assert len(meta.grad_colors) == 5


def test_every_slice_grid_spans_global_extent(make_config, write_csv, data_dir):
    write_csv("1.csv", "X,Y,Value\n3,1,1\n")
    write_csv("2.csv", "X,Y,Value\n1,4,1\n1,1,\n")
    output = PipelineOrchestrator(make_config(IN_DIR=str(data_dir))).build()
    for dataset in output.datasets.values():
        assert len(dataset.heat) == 3 * 4
    assert output.datasets["2"].heat[0] == (1, 1, -1.0)


def test_run_writes_json_and_document(run_config, temp_dir):
    output = PipelineOrchestrator(run_config).run(now=FIXED_NOW)

    data = json.loads((temp_dir / "out" / "data.json").read_text())
    assert data["meta"]["x_max"] == 2
    assert data["datasets"]["a"]["heat"][1] == [1, 2, 3.5]
    assert data["datasets"]["b"]["points"][0]["extras"] == {}
    assert data == json.loads(output.model_dump_json())

    document = (temp_dir / "out" / "index.html").read_text()
    assert "<title>GroveGrid</title>" in document
    assert '"x_max": 2' in document
    assert "{{INLINE_JSON}}" not in document


def test_idempotent(run_config):
    first = PipelineOrchestrator(run_config).build(now=FIXED_NOW)
    second = PipelineOrchestrator(run_config).build(now=FIXED_NOW)
    assert first == second


def test_short_header_aborts_without_output(make_config, write_csv, data_dir, temp_dir):
    write_csv("a.csv", "X;Y;Value\n1;1;1\n")
    write_csv("b.csv", "X;Y\n1;1\n")
    out_dir = temp_dir / "out"
    config = make_config(IN_DIR=str(data_dir), OUT_DIR=str(out_dir), JSON_OUT=str(out_dir / "data.json"))

    with pytest.raises(FileStructureError, match="b.csv"):
        PipelineOrchestrator(config).run()

    assert not out_dir.exists()


def test_missing_template_aborts_without_output(make_config, write_csv, data_dir, temp_dir):
    write_csv("a.csv", "X,Y,Value\n1,1,1\n")
    out_dir = temp_dir / "out"
    config = make_config(
        IN_DIR=str(data_dir),
        OUT_DIR=str(out_dir),
        JSON_OUT=str(out_dir / "data.json"),
        TEMPLATE=str(temp_dir / "missing.html"),
    )

    with pytest.raises(FileNotFoundError):
        PipelineOrchestrator(config).run()

    assert not (out_dir / "data.json").exists()
    assert not out_dir.exists()


def test_extras_cannot_break_out_of_inline_json(make_config, write_csv, data_dir, temp_dir):
    write_csv("a.csv", "X,Y,Value,Size,Note\n1,1,1,1,</script><script>alert(1)</script>\n")
    out_dir = temp_dir / "out"
    config = make_config(IN_DIR=str(data_dir), OUT_DIR=str(out_dir))

    PipelineOrchestrator(config).run(now=FIXED_NOW)

    document = (out_dir / "index.html").read_text()
    assert "<script>alert(1)" not in document
    assert "\\u003c/script\\u003e\\u003cscript\\u003ealert(1)" in document


def test_no_input_files_writes_nothing(make_config, data_dir, temp_dir, caplog):
    out_dir = temp_dir / "out"
    config = make_config(IN_DIR=str(data_dir), OUT_DIR=str(out_dir))
    assert PipelineOrchestrator(config).run() is None
    assert not out_dir.exists()
    assert "No files matching" in caplog.text


def test_missing_input_dir(make_config, temp_dir):
    config = make_config(IN_DIR=str(temp_dir / "missing"))
    with pytest.raises(FileNotFoundError):
        PipelineOrchestrator(config).build()


def test_file_pattern_filters_inputs(make_config, write_csv, data_dir):
    write_csv("a.csv", "X,Y,Value\n1,1,1\n")
    write_csv("notes.txt", "not a grid")
    output = PipelineOrchestrator(make_config(IN_DIR=str(data_dir))).build()
    assert output.meta.months == ["a"]


def test_contract_violation_surfaces(run_config, monkeypatch):
    orch = PipelineOrchestrator(run_config)
    monkeypatch.setattr(orch.materializer, "from_dataarray", lambda sl, da: SliceDataset(heat=[], points=[]))
    with pytest.raises(ContractViolation, match="Grid contract"):
        orch.build()


def test_setup_logging_file_handler(make_config, temp_dir):
    import logging

    log_path = temp_dir / "logs" / "run.log"
    config = make_config(LOG_LEVEL="debug")
    config = config.model_copy(update={"logging": config.logging.model_copy(update={"log_file": str(log_path)})})
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        PipelineOrchestrator(config).setup_logging()
        logging.getLogger("grovegrid.test").debug("hello")
        for handler in root.handlers:
            handler.flush()
        assert "hello" in log_path.read_text()
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved[0]:
            root.addHandler(handler)
        root.setLevel(saved[1])
