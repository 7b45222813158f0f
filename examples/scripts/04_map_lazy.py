"""iter_map: map lazily, computing results only as they are consumed.

Demonstrates: the transform runs once per element, in order, on demand.
"""

from seqmap import iter_map


def shout(word: str) -> str:
    print(f"transforming {word!r}")
    return word.upper()


results = iter_map(["a", "b", "c"], shout)
print("nothing transformed yet")

print(next(results))  # transforms "a"
print(list(results))  # transforms "b" and "c"
