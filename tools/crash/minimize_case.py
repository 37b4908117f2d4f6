#!/usr/bin/env python3
"""
Deterministic reducer for failing Bencode cases.

A document "fails" when the reference codec does not accept it as canonical:
  1) decode raises (Truncated, InvalidCharacter, InvalidLength, OutOfOrderKey)
  2) decode succeeds but leaves trailing bytes
  3) decode succeeds but re-encoding is not byte-identical (non-canonical input,
     e.g. a zero-padded length or a repeated dict key)

Reduction:
- Remove chunks of bytes, halving the chunk size down to single bytes.
- Keep any removal that still fails with the same kind, until no more apply.

Usage:
  minimize_case.py input.bencode -o minimized.bencode
"""
import argparse, sys, pathlib
from typing import Tuple

# Local import (repo root):
REPO = pathlib.Path(__file__).resolve().parents[2]
sys.path.insert(0, str(REPO / "impl" / "python" / "bencode_core_ref"))
from bencode_core_ref import ByteSource, Error, decode_from, encode  # type: ignore

def predicate(doc: bytes) -> Tuple[bool, str]:
    src = ByteSource(doc)
    try:
        v = decode_from(src)
    except Error as e:
        return True, e.__class__.__name__
    if src.position != len(doc):
        return True, "TrailingData"
    if encode(v) != doc:
        return True, "NonCanonical"
    return False, ""

def try_shrink(doc: bytes, kind: str) -> bytes:
    best = doc
    chunk = max(1, len(best) // 2)
    while True:
        improved = False
        i = 0
        while i < len(best):
            cand = best[:i] + best[i+chunk:]
            ok, why = predicate(cand)
            if ok and why == kind:
                best = cand
                improved = True
            else:
                i += chunk
        if not improved:
            if chunk == 1:
                return best
            chunk = max(1, chunk // 2)

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("input", help=".bencode file to minimize")
    ap.add_argument("-o", "--out", required=True, help="output minimized .bencode")
    args = ap.parse_args(argv)

    data = pathlib.Path(args.input).read_bytes()
    ok, why = predicate(data)
    if not ok:
        print("Input does not reproduce a failure; nothing to minimize.", file=sys.stderr)
        pathlib.Path(args.out).write_bytes(data)
        return 1

    minimized = try_shrink(data, why)
    pathlib.Path(args.out).write_bytes(minimized)
    mok, mwhy = predicate(minimized)
    print("Minimized:", len(data), "->", len(minimized), "bytes; still failing:", mok)
    if mok:
        print("Reason:", mwhy)
    return 0

if __name__ == "__main__":
    sys.exit(main())
