"""
Write a reproducible mock ranking document to config/data/college_data.json.

Usage:
    python scripts/mock_college_data.py [n_records] [output_path]
"""
import json
import random
import sys
from pathlib import Path

random.seed(0)

N_RECORDS = int(sys.argv[1]) if len(sys.argv) > 1 else 45
OUTPUT = Path(sys.argv[2]) if len(sys.argv) > 2 else Path("config/data/college_data.json")

institutes = [
    "Indian Institute of Technology",
    "National Institute of Technology",
    "Indian Institute of Information Technology",
    "Institute of Engineering and Management",
    "College of Engineering",
    "Institute of Science",
]
cities = [
    ("Chennai", "Tamil Nadu"),
    ("Delhi", "Delhi NCR"),
    ("Mumbai", "Maharashtra"),
    ("Kanpur", "Uttar Pradesh"),
    ("Kharagpur", "West Bengal"),
    ("Roorkee", "Uttarakhand"),
    ("Guwahati", "Assam"),
    ("Pune", "Maharashtra"),
]
courses = [
    "B.Tech Computer Science and Engineering",
    "B.Tech Electrical Engineering",
    "B.Tech Mechanical Engineering",
    "M.Tech Data Science",
]


def inr(amount: int) -> str:
    """Indian digit grouping: 1,20,000"""
    s = str(amount)
    head, tail = s[:-3], s[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return "₹" + ",".join(groups + [tail]) if groups else "₹" + tail


records = []
for rank in range(1, N_RECORDS + 1):
    city, state = random.choice(cities)
    fees = random.randrange(80_000, 450_000, 50)
    placement = random.randrange(600_000, 2_500_000, 1000)
    record = {
        "college_rank": rank,
        "college_name": f"{random.choice(institutes)} {city}",
        "college_location": f"{city}, {state}",
        "college_course": random.choice(courses),
        # mix plain numbers with decorated strings, like the real feed
        "college_fees": fees if rank % 7 == 0 else inr(fees),
        "college_placement": inr(placement),
        "college_review_rating": round(random.uniform(6.0, 9.8), 1),
        "college_rating": round(random.uniform(6.0, 9.8), 1),
    }
    if rank % 11 == 0:
        del record["college_placement"]
    records.append(record)

OUTPUT.parent.mkdir(parents=True, exist_ok=True)
with OUTPUT.open("w", encoding="utf-8") as f:
    json.dump(records, f, ensure_ascii=False, indent=2)

print(f"Wrote {len(records)} records to {OUTPUT}")
