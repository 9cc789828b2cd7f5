#!/usr/bin/env python3
import argparse

from lane_dodge.trace import TRACE_FIELDS, TraceRec, load_jsonl


def fmt_val(v):
    if isinstance(v, list):
        return "[" + ",".join(hex(x) if isinstance(x, int) else repr(x) for x in v) + "]"
    return repr(v)


def first_mismatch(a: list[TraceRec], b: list[TraceRec], *, ignore_fields: set[str]) -> tuple[int, str] | None:
    n = min(len(a), len(b))
    for i in range(n):
        ra = a[i].raw
        rb = b[i].raw
        # Sequencing first, so a skipped tick is reported as such.
        for k in ["cycle", "mode"]:
            if k in ignore_fields:
                continue
            if ra.get(k, None) != rb.get(k, None):
                return i, k

        for k in TRACE_FIELDS:
            if k in ("cycle", "mode") or k in ignore_fields:
                continue
            if ra.get(k, None) != rb.get(k, None):
                return i, k
    if len(a) != len(b):
        return n, "<length>"
    return None


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Diff lane-dodge JSONL state traces.")
    ap.add_argument("ref_jsonl", help="Reference trace")
    ap.add_argument("dut_jsonl", help="Trace under test")
    ap.add_argument(
        "--ignore",
        action="append",
        default=[],
        help="Ignore a field (repeatable). Example: --ignore prng",
    )
    args = ap.parse_args(argv)

    ignore_fields = set(args.ignore)

    ref = load_jsonl(args.ref_jsonl)
    dut = load_jsonl(args.dut_jsonl)

    mm = first_mismatch(ref, dut, ignore_fields=ignore_fields)
    if mm is None:
        print(f"ok: traces match ({len(ref)} ticks)")
        return 0

    idx, field = mm
    if field == "<length>":
        print(f"mismatch: length differs: ref={len(ref)} dut={len(dut)} (first extra at idx={idx})")
        return 1

    ra = ref[idx].raw
    rb = dut[idx].raw
    print(f"mismatch: idx={idx} field={field}")
    print(f"  ref.{field}={fmt_val(ra.get(field, None))}")
    print(f"  dut.{field}={fmt_val(rb.get(field, None))}")
    for k in ["cycle", "mode", "lane", "track", "score", "collision"]:
        if k in ignore_fields:
            continue
        print(f"  ref.{k}={fmt_val(ra.get(k, None))}  dut.{k}={fmt_val(rb.get(k, None))}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
