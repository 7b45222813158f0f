"""Non-destructive update: promote users without touching the originals.

Demonstrates: building new records from old ones with {**record, ...}.
"""

from seqmap import map_sequence

users = [
    {"id": 1, "name": "Ada", "level": "user"},
    {"id": 2, "name": "Linus", "level": "user"},
]

admins = map_sequence(users, lambda user: {**user, "level": "admin"})

print(admins)  # both records now have level "admin"
print(users)  # originals still have level "user"
