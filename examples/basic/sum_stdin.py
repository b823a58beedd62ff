"""Read N and then N integers from standard input, print their sum.

    printf '3\n10 20 30\n' | python examples/basic/sum_stdin.py
"""

from fastscan import Scanner

scanner = Scanner.from_stdin()
n = scanner.next_int()
print(sum(scanner.next_long_array(n)))
