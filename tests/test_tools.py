import importlib.util
import pathlib

from bencode_core_ref import decode, encode

ROOT = pathlib.Path(__file__).resolve().parents[1]


def _load(name, rel):
    spec = importlib.util.spec_from_file_location(name, ROOT / rel)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


corpus = _load("generate_random_corpus", "tools/corpus/generate_random_corpus.py")
minimizer = _load("minimize_case", "tools/crash/minimize_case.py")


def test_corpus_is_deterministic_and_canonical(tmp_path):
    a, b = tmp_path / "a", tmp_path / "b"
    corpus.main(["--seed", "7", "-n", "20", "-o", str(a)])
    corpus.main(["--seed", "7", "-n", "20", "-o", str(b)])
    files = sorted(a.glob("*.bencode"))
    assert len(files) == 20
    assert [p.name for p in files] == [p.name for p in sorted(b.glob("*.bencode"))]
    for p in files:
        doc = p.read_bytes()
        assert encode(decode(doc)) == doc
        assert minimizer.predicate(doc) == (False, "")


def test_predicate_kinds():
    assert minimizer.predicate(b"i42") == (True, "Truncated")
    assert minimizer.predicate(b"d1:bi1e1:ai2ee") == (True, "OutOfOrderKey")
    assert minimizer.predicate(b"i1ei2e") == (True, "TrailingData")
    assert minimizer.predicate(b"03:abc") == (True, "NonCanonical")
    assert minimizer.predicate(b"l3:abce") == (False, "")


def test_minimize_keeps_failure_kind(tmp_path):
    src = tmp_path / "in.bencode"
    out = tmp_path / "out.bencode"
    doc = b"d4:infod6:lengthi1e4:name3:abce1:ai1ee"
    src.write_bytes(doc)
    assert minimizer.main([str(src), "-o", str(out)]) == 0
    small = out.read_bytes()
    assert len(small) < len(doc)
    assert minimizer.predicate(small) == (True, "OutOfOrderKey")


def test_minimize_rejects_passing_input(tmp_path, capsys):
    src = tmp_path / "ok.bencode"
    out = tmp_path / "out.bencode"
    src.write_bytes(b"le")
    assert minimizer.main([str(src), "-o", str(out)]) == 1
    assert out.read_bytes() == b"le"
    assert "nothing to minimize" in capsys.readouterr().err
