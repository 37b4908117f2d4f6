#!/usr/bin/env python3
"""
Generate deterministic randomized canonical Bencode documents using the reference encoder,
to seed the fuzz corpus and the vector checker.
"""
import sys, random, binascii, argparse, pathlib
# Local import when running from repo root
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[2] / "impl" / "python" / "bencode_core_ref"))
from bencode_core_ref import Array, Bytes, Integer, Object, Value, encode  # type: ignore

ALPH = b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_ "

def rand_key(rng: random.Random, max_len: int = 12) -> bytes:
    n = rng.randint(0, max_len)
    return bytes(rng.choice(ALPH) for _ in range(n))

def rand_payload(rng: random.Random, max_bytes: int = 24) -> bytes:
    n = rng.randint(0, max_bytes)
    # Mostly printable, sometimes raw binary (piece hashes and the like)
    if rng.random() < 0.3:
        return bytes(rng.getrandbits(8) for _ in range(n))
    return bytes(rng.choice(ALPH) for _ in range(n))

def rand_integer(rng: random.Random) -> Integer:
    bucket = rng.random()
    if bucket < 0.05: return Integer(b"0")
    if bucket < 0.10: return Integer.from_int(rng.getrandbits(200))
    if bucket < 0.50: return Integer.from_int(rng.randint(0, 256))
    return Integer.from_int(rng.getrandbits(63))

def rand_value(rng: random.Random, depth: int = 0) -> Value:
    if depth > 3:
        # cap nesting
        choices = ["int", "bytes"]
    else:
        choices = ["int", "bytes", "list", "dict"]
    k = rng.choice(choices)
    if k == "int":
        return rand_integer(rng)
    if k == "bytes":
        return Bytes(rand_payload(rng))
    if k == "list":
        n = rng.randint(0, 4)
        return Array([rand_value(rng, depth+1) for _ in range(n)])
    if k == "dict":
        n = rng.randint(0, 4)
        return Object((rand_key(rng), rand_value(rng, depth+1)) for _ in range(n))
    raise AssertionError("unreachable")

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=1337)
    ap.add_argument("-n", "--count", type=int, default=128)
    ap.add_argument("-o", "--outdir", type=str, required=True)
    args = ap.parse_args(argv)

    rng = random.Random(args.seed)
    outdir = pathlib.Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    for i in range(args.count):
        b = encode(rand_value(rng, 0))
        h = binascii.hexlify(b[:8]).decode("ascii")
        p = outdir / f"generated_{i:04d}_{h}.bencode"
        with open(p, "wb") as f:
            f.write(b)

    print(f"wrote {args.count} seeds to {outdir}")

if __name__ == "__main__":
    main()
