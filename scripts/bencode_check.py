#!/usr/bin/env python3
"""
bencode_check.py - reference checker for canonical Bencode vectors

Usage:
  python scripts/bencode_check.py              # runs over tests/vectors
  python scripts/bencode_check.py <file.hex>   # checks a single hex vector
Exits non-zero on failure.

Vectors are hex dumps; whitespace and '#' comments are ignored.
"""

import sys, os, glob, re, binascii, pathlib

# Local import when running from repo root
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "impl" / "python" / "bencode_core_ref"))
from bencode_core_ref import ByteSource, Error, decode_from, encode  # type: ignore

class TrailingData(Exception): pass

def parse_hex_file(path: str) -> bytes:
    lines = open(path, 'r', encoding='utf-8').read().splitlines()
    s = "".join(line.split('#', 1)[0] for line in lines)
    hex_str = re.sub(r'[^0-9A-Fa-f]', '', s)
    if len(hex_str) % 2 != 0:
        raise ValueError("odd hex length in " + path)
    return binascii.unhexlify(hex_str)

def roundtrip_bytes(b: bytes) -> bytes:
    src = ByteSource(b)
    v = decode_from(src)
    if src.position != len(b):
        raise TrailingData(src.position)
    return encode(v)

def run_vectors(root: str) -> int:
    ok = 0; bad = 0
    valid = sorted(glob.glob(os.path.join(root, "valid", "*.hex")))
    invalid = sorted(glob.glob(os.path.join(root, "invalid", "*.hex")))
    # valid: must decode and re-encode to identical bytes
    for p in valid:
        b = parse_hex_file(p)
        try:
            out = roundtrip_bytes(b)
        except (Error, TrailingData) as e:
            print(f"[FAIL] valid vector rejected: {os.path.basename(p)} -> {e.__class__.__name__}")
            bad += 1
            continue
        if out != b:
            print(f"[FAIL] re-encode mismatch: {os.path.basename(p)}")
            bad += 1
        else:
            ok += 1
    # invalid: must be rejected
    for p in invalid:
        b = parse_hex_file(p)
        try:
            roundtrip_bytes(b)
        except (Error, TrailingData):
            ok += 1
            continue
        print(f"[FAIL] invalid vector accepted: {os.path.basename(p)}")
        bad += 1
    print(f"\nSummary: {ok} ok, {bad} failed")
    return 1 if bad else 0

def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) == 1 and argv[0].endswith(".hex"):
        b = parse_hex_file(argv[0])
        try:
            out = roundtrip_bytes(b)
        except (Error, TrailingData) as e:
            print(f"Rejected: {e.__class__.__name__}")
            return 1
        if out != b:
            print("Mismatch after re-encode")
            return 1
        print("OK")
        return 0
    root = os.path.join(pathlib.Path(__file__).resolve().parents[1], "tests", "vectors")
    return run_vectors(root)

if __name__ == "__main__":
    sys.exit(main())
