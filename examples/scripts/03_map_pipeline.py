"""Map steps chained in a pipeline.

Demonstrates: Source.list >> Map >> function, run with a record limit, and a
single Map step run directly on a list of records.
"""

from seqmap import Map, Source

pipeline = (
    Source.list([
        {"id": 1, "text": "The quick brown fox jumps over the lazy dog"},
        {"id": 2, "text": "Machine learning is a subset of AI"},
        {"id": 3, "text": "Python is great for data science and web development"},
    ])
    >> Map(lambda r: {**r, "word_count": len(r["text"].split())}).as_step("count_words")
    # plain functions are wrapped in a Map step
    >> (lambda r: {**r, "text_upper": r["text"].upper()})
)

records = pipeline.run(limit=2)

for record in records:
    print(record)

# A single step needs no source
promoted = Map(lambda r: {**r, "level": "admin"}).run([{"id": 1, "level": "user"}])
print(promoted)
