import json

from rich.console import Console

from vigilante_cables.cli import parse_args
from vigilante_cables.output import print_health_console
from vigilante_cables.pipeline import run_pipeline

WARNINGS = [
    {
        "text": "SUBMARINE CABLE FAULT on MAREA. CABLE DAMAGE confirmed. 36-50N 075-58W.",
        "issueDate": "151200Z FEB 2026",
        "navArea": "IV",
        "msgYear": "2026",
        "msgNumber": "60",
    },
    {
        "text": "CABLESHIP CS RELIANCE CABLE operations in area. SUBMARINE CABLE laying. 01-20N 103-50E. ON STATION.",
        "issueDate": "151000Z FEB 2026",
        "navArea": "XI",
        "msgYear": "2026",
        "msgNumber": "61",
    },
    {
        "text": "Naval exercise in area.",
        "issueDate": "151000Z FEB 2026",
        "navArea": "IV",
        "msgYear": "2026",
        "msgNumber": "62",
    },
]


def test_run_pipeline_from_file_writes_logs(tmp_path, capsys):
    src = tmp_path / "avisos.json"
    src.write_text(json.dumps(WARNINGS), encoding="utf-8")
    out_json = tmp_path / "resumen.json"
    log_jsonl = tmp_path / "registros.jsonl"

    result = run_pipeline(
        warnings_path=str(src),
        console_format="json",
        output_json=str(out_json),
        log_jsonl=str(log_jsonl),
        now="2026-02-15T12:00:00Z",
    )

    assert result["generatedAt"] == "2026-02-15T12:00:00.000Z"
    assert result["cables"]["marea"]["status"] == "fault"
    marea_evidence = result["cables"]["marea"]["evidence"]
    assert len(marea_evidence) == 1
    assert marea_evidence[0]["meta"]["warningId"] == "IV-2026-60"
    assert result["rules"]["marea"] == "operator_fault"
    assert result["stats"]["warningsTotal"] == 3
    assert result["stats"]["cableRelated"] == 2

    printed = json.loads(capsys.readouterr().out)
    assert set(printed["cables"]) == set(result["cables"])

    records = [json.loads(ln) for ln in log_jsonl.read_text(encoding="utf-8").splitlines()]
    assert {r["cable_id"] for r in records} == set(result["cables"])
    assert all(r["time"] == "2026-02-15T12:00:00.000Z" for r in records)

    summary = json.loads(out_json.read_text(encoding="utf-8"))
    assert summary["counts"]["status"]["fault"] == 1
    assert summary["last"]["cables"]["marea"]["status"] == "fault"


def test_run_pipeline_old_warnings_decay(tmp_path):
    src = tmp_path / "avisos.jsonl"
    src.write_text("\n".join(json.dumps(w) for w in WARNINGS), encoding="utf-8")
    result = run_pipeline(warnings_path=str(src), console_format="plain", now="2026-03-15T12:00:00Z")
    assert result["cables"] == {}


def test_print_health_console_rich():
    result = {
        "generatedAt": "2026-02-15T12:00:00.000Z",
        "cables": {
            "marea": {
                "status": "fault",
                "score": 0.9,
                "confidence": 0.9,
                "lastUpdated": "2026-02-15T12:00:00.000Z",
                "evidence": [{"source": "NGA", "summary": "Fault/damage reported: [CABLE] cut", "ts": "x"}],
            }
        },
        "stats": {"warningsTotal": 1, "cableRelated": 1, "unresolved": 0, "unparseableDates": 0, "signals": 1},
    }
    console = Console(record=True, width=200)
    print_health_console(result, console_format="rich", console=console)
    text = console.export_text()
    assert "marea" in text
    assert "fault" in text
    assert "[CABLE]" in text


def test_parse_args_defaults(monkeypatch):
    monkeypatch.delenv("CONSOLE_FORMAT", raising=False)
    args = parse_args([])
    assert args.warnings is None
    assert args.console_format == "rich"
    assert args.iterations == 1
