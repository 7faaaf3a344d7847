"""Skill catalogue."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from jobboard.db import Skill


def list_skills(db: Session, category: str | None = None) -> list[Skill]:
    query = db.query(Skill)
    if category:
        query = query.filter(Skill.category == category)
    return query.order_by(Skill.name).all()


def get_or_create_skill(db: Session, name: str, category: str = "technical") -> Skill:
    """Case-insensitive lookup by name; adds (and flushes) a new skill when missing."""
    name = name.strip()
    skill = db.query(Skill).filter(func.lower(Skill.name) == name.lower()).first()
    if skill is None:
        skill = Skill(name=name, category=category)
        db.add(skill)
        db.flush()
    return skill


def unique_names(names: list[str]) -> list[str]:
    """Strip, drop blanks and case-insensitive duplicates, keep first-seen order."""
    seen = set()
    result = []
    for name in names or []:
        cleaned = name.strip()
        if cleaned and cleaned.lower() not in seen:
            seen.add(cleaned.lower())
            result.append(cleaned)
    return result
