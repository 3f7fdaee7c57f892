"""Simple example showing the partition behind both substring views.

Prints each segment of the first string, marking common runs and gaps, then
the filtered results for a few thresholds.
"""
from alignrun_core import common_substrings, differing_substrings, partition

s1 = "Hello there, how are you"
s2 = "Hello there how are you"

for segment in partition(s1, s2):
    marker = "=" if segment.common else "+"
    print(f"{marker} {segment.start:3d} {segment.text!r}")

for min_length in (1, 5, 12):
    print(min_length, common_substrings(s1, s2, min_length), differing_substrings(s1, s2, min_length))
