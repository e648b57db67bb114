import json

import pytest

from vigilante_cables.data.loaders import load_warnings_file, warnings_from_payload

RECORDS = [
    {
        "text": "SUBMARINE CABLE FAULT on MAREA, CABLE DAMAGE confirmed",
        "issueDate": "151200Z FEB 2026",
        "navArea": "IV",
        "msgYear": "2026",
        "msgNumber": 42,
    },
    {"text": "Naval exercise", "issueDate": "151300Z FEB 2026", "navArea": None, "msgYear": "2026", "msgNumber": "43"},
]


def test_warnings_from_payload_list_and_envelope():
    assert len(warnings_from_payload(RECORDS)) == 2
    assert len(warnings_from_payload({"warnings": RECORDS})) == 2
    assert warnings_from_payload({"other": 1}) == []
    assert warnings_from_payload("not json") == []
    ws = warnings_from_payload(RECORDS)
    assert ws[0].msg_number == "42"
    assert ws[1].nav_area == ""
    assert ws[0].warning_id == "IV-2026-42"
    assert ws[1].warning_id == "X-2026-43"


def test_load_json_and_jsonl(tmp_path):
    p = tmp_path / "avisos.json"
    p.write_text(json.dumps(RECORDS), encoding="utf-8")
    ws = load_warnings_file(p)
    assert [w.msg_number for w in ws] == ["42", "43"]

    pl = tmp_path / "avisos.jsonl"
    pl.write_text("\n".join(json.dumps(r) for r in RECORDS) + "\n\n", encoding="utf-8")
    ws = load_warnings_file(str(pl))
    assert [w.msg_number for w in ws] == ["42", "43"]
    assert ws[0].text.startswith("SUBMARINE CABLE FAULT")


def test_load_csv_keeps_strings_and_fills_missing_columns(tmp_path):
    csv = tmp_path / "avisos.csv"
    content = (
        "text,issueDate,msgYear,msgNumber\n"
        '"SUBMARINE CABLE FAULT on MAREA, CABLE DAMAGE confirmed",151200Z FEB 2026,2026,042\n'
        "Naval exercise,,2026,43\n"
    )
    csv.write_text(content, encoding="utf-8")
    ws = load_warnings_file(csv)
    assert len(ws) == 2
    assert ws[0].text == "SUBMARINE CABLE FAULT on MAREA, CABLE DAMAGE confirmed"
    assert ws[0].msg_number == "042"
    assert ws[0].nav_area == ""
    assert ws[1].issue_date == ""


def test_load_unsupported_format(tmp_path):
    p = tmp_path / "avisos.txt"
    p.write_text("x", encoding="utf-8")
    with pytest.raises(ValueError):
        load_warnings_file(p)
