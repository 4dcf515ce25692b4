import sys

from huffman_compression.errors import HuffmanFormatError
from huffman_compression.huffman_compressor import decode, encode

USAGE = "Usage: python -m huffman_compression (encode|decode) <input> <output>"


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 3 or args[0] not in ("encode", "decode"):
        print(USAGE)
        return 1

    command, input_f, output_f = args
    if command == "encode":
        print(f"\nEncoding {input_f} {output_f}")
        print(encode(input_f, output_f))
        return 0

    print(f"\nDecoding {input_f} {output_f}")
    try:
        print(decode(input_f, output_f))
    except HuffmanFormatError as e:
        print(f"{input_f}: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
