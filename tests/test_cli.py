import hexcodec
from a51 import A51
from a51_cli import main
from keyframe import parse_key


def engine_for(key_hex="0123456789ABCDEF", frame=0):
    engine = A51()
    engine.initialize(parse_key(key_hex), frame)
    return engine


def test_keystream_prints_15_bytes_by_default(capsys):
    assert main(["keystream"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == hexcodec.encode(engine_for().generate_keystream_bytes(15))
    assert "114 bits" in lines[1]


def test_keystream_custom_length_and_frame(capsys):
    assert main(["keystream", "--bytes", "4", "--frame", "42"]) == 0
    out = capsys.readouterr().out.splitlines()[0]
    assert out == hexcodec.encode(engine_for(frame=42).generate_keystream_bytes(4))


def test_burst(capsys):
    assert main(["burst", "--key", "FFEEDDCCBBAA9988"]) == 0
    out = capsys.readouterr().out.strip()
    assert len(out) == 114
    assert out == "".join("1" if b else "0" for b in engine_for("FFEEDDCCBBAA9988").generate_burst())


def test_encrypt_then_decrypt(capsys):
    assert main(["encrypt", "HELLO", "--frame", "7"]) == 0
    ciphertext = capsys.readouterr().out.strip()
    assert len(ciphertext) == 10

    assert main(["decrypt", ciphertext, "--frame", "7"]) == 0
    assert capsys.readouterr().out.strip() == "HELLO"


def test_bad_key_reports_error(capsys):
    assert main(["keystream", "--key", "1234"]) == 2
    err = capsys.readouterr().err
    assert err.startswith("error:")
    assert "16 hex chars" in err


def test_bad_frame_reports_error(capsys):
    assert main(["encrypt", "hi", "--frame", "twelve"]) == 2
    assert "error:" in capsys.readouterr().err


def test_bad_ciphertext_reports_error(capsys):
    assert main(["decrypt", "XYZ"]) == 2
    assert "Invalid hex digit" in capsys.readouterr().err


def test_negative_byte_count_reports_error(capsys):
    assert main(["keystream", "--bytes", "-1"]) == 2
    assert "error:" in capsys.readouterr().err
