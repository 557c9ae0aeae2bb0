"""Create the SofaClean tables. ``--reset`` drops them first (local development only)."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import argparse

from sofaclean.database import engine, Base
import sofaclean.models  # noqa: F401 - registers all models


def init_db(bind=None, reset: bool = False) -> list[str]:
    bind = bind or engine
    if reset:
        print(f"Dropping all tables on {bind.url.render_as_string(hide_password=True)}...")
        Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)
    tables = sorted(Base.metadata.tables)
    print(f"Tables ready: {', '.join(tables)}")
    return tables


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reset", action="store_true", help="drop existing tables before creating them")
    args = parser.parse_args()
    init_db(reset=args.reset)
