from __future__ import annotations

import json

import pytest
from lane_dodge.fsm import GameMode
from lane_dodge.game import reset_state
from lane_dodge.sim import LaneDodgeSim
from lane_dodge.trace import TraceWriter, load_jsonl, trace_record
from tools import lane_trace_diff as trace_diff


def _record_run(path, params, *, start_at: int = 0) -> None:
    with TraceWriter(path) as tw:
        sim = LaneDodgeSim(params, trace=tw)
        sim.reset()
        for cyc in range(4 * params.clk_freq):
            sim.center = 1 if cyc == start_at else 0
            sim.tick()


def test_trace_record_fields(params) -> None:
    rec = trace_record(reset_state(params))
    assert rec["mode"] == int(GameMode.SCORE_IDLE)
    assert rec["track"] == [0, 0, 0, 0]
    assert rec["score"] == 0
    assert len(rec["glyphs"]) == 4
    json.dumps(rec)


def test_writer_roundtrip(tmp_path, params) -> None:
    path = tmp_path / "run.jsonl"
    _record_run(path, params)
    recs = load_jsonl(path)
    assert len(recs) == 4 * params.clk_freq
    assert recs[0].raw["cycle"] == 1
    assert recs[-1].mode == GameMode.PLAY


def test_writer_decimates(tmp_path, params) -> None:
    path = tmp_path / "sparse.jsonl"
    with TraceWriter(path, every=12) as tw:
        sim = LaneDodgeSim(params, trace=tw)
        sim.run_cycles(48)
    assert tw.records == 4


def test_write_requires_open_file(tmp_path, params) -> None:
    tw = TraceWriter(tmp_path / "closed.jsonl")
    with pytest.raises(RuntimeError):
        tw.write(reset_state(params))


def test_load_rejects_bad_lines(tmp_path) -> None:
    path = tmp_path / "bad.jsonl"
    path.write_text('{"cycle": 1}\n[1, 2]\n', encoding="utf-8")
    with pytest.raises(SystemExit, match=":2:"):
        load_jsonl(path)


def test_unknown_mode_decodes_to_score_idle(tmp_path) -> None:
    path = tmp_path / "odd.jsonl"
    path.write_text('{"cycle": 1, "mode": 9}\n', encoding="utf-8")
    assert load_jsonl(path)[0].mode == GameMode.SCORE_IDLE


def test_diff_identical_runs(tmp_path, params, capsys) -> None:
    a, b = tmp_path / "a.jsonl", tmp_path / "b.jsonl"
    _record_run(a, params)
    _record_run(b, params)
    assert trace_diff.main([str(a), str(b)]) == 0
    assert "ok: traces match" in capsys.readouterr().out


def test_diff_reports_first_divergence(tmp_path, params, capsys) -> None:
    a, b = tmp_path / "a.jsonl", tmp_path / "b.jsonl"
    _record_run(a, params, start_at=0)
    _record_run(b, params, start_at=1)
    assert trace_diff.main([str(a), str(b)]) == 1
    out = capsys.readouterr().out
    assert "mismatch: idx=0 field=mode" in out


def test_diff_length_mismatch(tmp_path, params, capsys) -> None:
    a, b = tmp_path / "a.jsonl", tmp_path / "b.jsonl"
    _record_run(a, params)
    lines = a.read_text(encoding="utf-8").splitlines()
    b.write_text("\n".join(lines[:-1]) + "\n", encoding="utf-8")
    assert trace_diff.main([str(a), str(b)]) == 1
    assert "length differs" in capsys.readouterr().out


def test_diff_ignore_field(tmp_path, params, capsys) -> None:
    a, b = tmp_path / "a.jsonl", tmp_path / "b.jsonl"
    _record_run(a, params)
    recs = [json.loads(ln) for ln in a.read_text(encoding="utf-8").splitlines()]
    recs[5]["prng"] ^= 0xFF
    b.write_text("".join(json.dumps(r) + "\n" for r in recs), encoding="utf-8")
    assert trace_diff.main([str(a), str(b)]) == 1
    assert "field=prng" in capsys.readouterr().out
    assert trace_diff.main([str(a), str(b), "--ignore", "prng"]) == 0
