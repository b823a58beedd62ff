"""Handle bad tokens without exceptions using the try_ extractors."""

from fastscan import EndOfStreamError, Scanner

scanner = Scanner.from_bytes(b"12 abc 7 4.5 9")
while True:
    try:
        result = scanner.try_next_int()
    except EndOfStreamError:
        break
    if result.is_ok():
        print("int:", result.value)
    else:
        print("skipped:", result.error)
