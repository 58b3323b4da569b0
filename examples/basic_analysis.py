#!/usr/bin/env python3
"""
Example: Basic bank analysis

Shows how to read a DX7 bulk dump, inspect voices and find duplicates.
"""

import sys

sys.path.insert(0, "..")

from dx7dump import DX7BulkReader, find_duplicates, validate_bulk_dump


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else "rom1a.syx"

    with open(path, "rb") as f:
        data = f.read()

    # Check framing and checksum first
    result = validate_bulk_dump(data)
    if not result.valid:
        print(f"Invalid dump ({result.kind.value}): {result.reason}")
        return 1

    dump = DX7BulkReader().parse_bytes(data)

    # Voice names
    print("Voices:")
    for voice in dump.voices:
        print(f"  {voice.number:02d}: {voice.name}  alg {voice.algorithm_number:2d}  {voice.transpose_label}")
    print()

    # Operators of the first voice, Operator 1 first
    voice = dump.voice(1)
    print(f"Operators of {voice.name}:")
    for op in voice.operators:
        if op.is_fixed:
            freq = f"{op.fixed_frequency:.2f} Hz"
        else:
            freq = f"ratio {op.frequency_coarse}"
        print(f"  OP{op.number}: level {op.output_level:2d}  {freq}  break point {op.break_point_label}")
    print()

    # Duplicates
    pairs = find_duplicates(dump)
    if pairs:
        for i, j in pairs:
            print(f"Voice {i} and voice {j} are identical")
    else:
        print("No duplicate voices")

    return 0


if __name__ == "__main__":
    sys.exit(main())
