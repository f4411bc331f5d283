#!/usr/bin/env python3
"""Console report of a character's certificate progress.

Usage examples:
  - Report every certificate for a fresh character:
      python main.py

  - Supply trained skills (skill_id=level) and a custom catalog:
      python main.py --catalog data/certificates.json --skill 3300=3 --skill 3310=2

  - Read skills from a JSON mapping {"3300": 3, ...} and filter by group:
      python main.py --skills-file my_skills.json --group Gunnery
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from modules.certificates.exceptions import CatalogError
from modules.certificates.models.character import Character
from modules.certificates.services.catalog_loader import load_catalog
from modules.certificates.services.report import list_certificate_rows

logger = logging.getLogger(__name__)


def _parse_skill(text: str) -> tuple[int, int]:
    try:
        skill_id, level = text.split("=", 1)
        return int(skill_id), int(level)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected SKILL_ID=LEVEL, got {text!r}") from None


def _read_skills(path: Path | None, pairs: list[tuple[int, int]]) -> dict[int, int]:
    skills: dict[int, int] = {}
    if path is not None:
        with path.open("r", encoding="utf-8") as fh:
            skills.update({int(k): int(v) for k, v in json.load(fh).items()})
    skills.update(dict(pairs))
    return skills


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--catalog", type=Path, default=None, help="Reference catalog JSON")
    parser.add_argument("--name", default="Pilot", help="Character name")
    parser.add_argument("--skill", dest="skills", action="append", type=_parse_skill, default=[],
                        help="Trained skill as SKILL_ID=LEVEL (repeatable)")
    parser.add_argument("--skills-file", type=Path, default=None, help="JSON mapping of skill id to level")
    parser.add_argument("--group", default=None, help="Only show certificates of this group")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    try:
        catalog = load_catalog(args.catalog)
    except CatalogError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("Could not read catalog: %s", e)
        return 1

    try:
        skills = _read_skills(args.skills_file, args.skills)
    except OSError as e:
        logger.error("Could not read skills file: %s", e)
        return 1
    except (ValueError, TypeError, AttributeError) as e:
        logger.error("Invalid skills file %s: %s", args.skills_file, e)
        return 1

    character = Character(args.name, catalog, skills=skills)
    character.update_certificates()

    for row in list_certificate_rows(character, group=args.group):
        badge = row["badge"] or "-"
        nxt = row["next"] or "complete"
        print(f"{row['group']:<12} {row['name']:<28} {badge:<32} next: {nxt:<9} {row['training_time_text']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
