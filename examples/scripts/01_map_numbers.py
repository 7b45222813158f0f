"""map_sequence: apply a function to every element of a list.

Demonstrates: doubling and squaring numbers, results in input order.
"""

from seqmap import map_sequence

numbers = [1, 2, 3, 4, 5]

doubled = map_sequence(numbers, lambda n: n * 2)
squared = map_sequence(numbers, lambda n: n**2)

print(doubled)  # [2, 4, 6, 8, 10]
print(squared)  # [1, 4, 9, 16, 25]
print(numbers)  # unchanged: [1, 2, 3, 4, 5]
