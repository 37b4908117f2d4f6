import importlib.util
import pathlib

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
VECTORS = ROOT / "tests" / "vectors"


def _load_checker():
    spec = importlib.util.spec_from_file_location("bencode_check", ROOT / "scripts" / "bencode_check.py")
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


checker = _load_checker()


def test_all_vectors_pass(capsys):
    assert checker.run_vectors(str(VECTORS)) == 0
    assert "0 failed" in capsys.readouterr().out


@pytest.mark.parametrize("path", sorted((VECTORS / "valid").glob("*.hex")), ids=lambda p: p.stem)
def test_valid_vector_roundtrips(path):
    b = checker.parse_hex_file(str(path))
    assert checker.roundtrip_bytes(b) == b


def test_single_vector_mode(capsys):
    assert checker.main([str(VECTORS / "valid" / "dict_scenario.hex")]) == 0
    assert capsys.readouterr().out.strip() == "OK"
    assert checker.main([str(VECTORS / "invalid" / "dict_out_of_order.hex")]) == 1
    assert "OutOfOrderKey" in capsys.readouterr().out


def test_trailing_data_is_rejected_by_checker():
    with pytest.raises(checker.TrailingData):
        checker.roundtrip_bytes(b"i1ei2e")


def test_hex_comments_are_ignored(tmp_path):
    p = tmp_path / "c.hex"
    p.write_text("# le\n6c 65  # list\n", encoding="utf-8")
    assert checker.parse_hex_file(str(p)) == b"le"
