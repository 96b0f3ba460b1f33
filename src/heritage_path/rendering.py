"""Text rendering of ancestry paths."""

from .models import AncestryPath, Person


def format_person(person: Person) -> str:
    if person.age is None:
        return f"{person.display_name}({person.id})"
    return f"{person.display_name}({person.id}, age {person.age})"


def relationship_phrase(kind: str) -> str:
    """'Father' and 'Father of' both read as 'is Father of'."""
    kind = kind.strip()
    if kind.lower().endswith(" of"):
        return f"is {kind}"
    return f"is {kind} of"


def render_path(path: AncestryPath) -> list[str]:
    """One line per hop, then a final line naming the last person."""
    lines = []
    for step in path.steps:
        if step.kind is None:
            lines.append(format_person(step.person))
        else:
            lines.append(f"{format_person(step.person)} {relationship_phrase(step.kind)}")
    return lines
