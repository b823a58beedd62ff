"""Count word lengths in a file and print a ranked table.

    python examples/files/word_frequencies.py README.md
"""

import sys

from fastscan import Scanner, StopWatch, count_elements, rate_table, sort_by_value

watch = StopWatch()
with open(sys.argv[1], "rb") as stream:
    lengths = [len(word) for word in Scanner(stream)]

for length, count, percent in rate_table(lengths):
    print(f"key : < {length} >\t...({count:4d}) [{percent:.2f}%]")

top = list(sort_by_value(count_elements(lengths)).items())[:3]
print("most common lengths:", top)
print("elapsed:", watch.split_string())
