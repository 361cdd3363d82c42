"""
seed_devs.py: fill the public directory with sample approved devs.

    python seed_devs.py             -> add the default sample set
    python seed_devs.py --count 5   -> add 5 generated devs after the named one
"""

import argparse

from app import create_app
from extensions import db
from modules.nominations.models import APPROVED, Record


def seed_devs(count):
    records = [
        Record(
            name="Gonzalo Stoll",
            province="Córdoba",
            expertise="frontend",
            link="https://gonzalostoll.com",
            status=APPROVED,
        )
    ]
    records += [
        Record(
            name=f"Dev {i}",
            province="Córdoba",
            expertise="frontend",
            link=f"https://dev{i}.com",
            status=APPROVED,
        )
        for i in range(count)
    ]
    db.session.add_all(records)
    db.session.commit()
    return len(records)


def main():
    parser = argparse.ArgumentParser(description="Seed the directory with sample devs")
    parser.add_argument("--count", type=int, default=20, help="number of generated devs (default 20)")
    args = parser.parse_args()

    app = create_app()
    with app.app_context():
        added = seed_devs(args.count)
        print(f"Seeded {added} devs.")


if __name__ == "__main__":
    main()
