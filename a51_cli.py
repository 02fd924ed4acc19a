#!/usr/bin/env python3
import argparse
import sys

import hexcodec
from a51 import A51
from config import Config
from keyframe import parse_frame, parse_key

DEFAULT_KEY = "0123456789ABCDEF"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="a51", description="A5/1 keystream generator and XOR cipher")
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--key", default=DEFAULT_KEY, help="session key, first 16 hex chars are used (64 bits)")
    common.add_argument("--frame", default="0", help="frame number, decimal (low 22 bits are used)")

    sub = p.add_subparsers(dest="cmd", required=True)

    ks = sub.add_parser("keystream", parents=[common], help="print keystream bytes as hex")
    ks.add_argument("--bytes", type=int, default=Config().display_bytes, dest="n_bytes")

    sub.add_parser("burst", parents=[common], help="print one 114-bit burst as 0/1")

    enc = sub.add_parser("encrypt", parents=[common], help="XOR UTF-8 text with the keystream, print hex")
    enc.add_argument("text")

    dec = sub.add_parser("decrypt", parents=[common], help="XOR hex ciphertext with the keystream, print text")
    dec.add_argument("hex")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # Parse everything before touching the engine
    try:
        key = parse_key(args.key)
        frame = parse_frame(args.frame)
        if args.cmd == "keystream" and args.n_bytes < 0:
            raise ValueError("--bytes cannot be negative")
        ciphertext = hexcodec.decode(args.hex) if args.cmd == "decrypt" else None
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    engine = A51()
    engine.initialize(key, frame)

    if args.cmd == "keystream":
        print(hexcodec.encode(engine.generate_keystream_bytes(args.n_bytes)))
        print(f"({args.n_bytes} bytes = {args.n_bytes * 8} bits; use first {engine.cfg.burst_bits} bits for a GSM burst)")
    elif args.cmd == "burst":
        print("".join("1" if b else "0" for b in engine.generate_burst()))
    elif args.cmd == "encrypt":
        print(hexcodec.encode(engine.encrypt(args.text.encode("utf-8"))))
    elif args.cmd == "decrypt":
        print(engine.decrypt(ciphertext).decode("utf-8", errors="replace"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
