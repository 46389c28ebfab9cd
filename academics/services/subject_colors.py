from django.db import transaction
from django.db.models import Max

from academics.models import SubjectColorMap
from portal.colors import subject_color


def _next_color_index():
    highest = SubjectColorMap.objects.aggregate(top=Max("color_index"))["top"]
    return 0 if highest is None else highest + 1


@transaction.atomic
def get_or_assign_subject_color(subject) -> str:
    """
    Return the subject's color classes, assigning the next free color index
    the first time the subject is seen.
    """
    mapping = SubjectColorMap.objects.filter(subject=subject).first()

    if mapping is None:
        mapping = SubjectColorMap.objects.create(
            subject=subject,
            color_index=_next_color_index()
        )

    return subject_color(mapping.color_index)


@transaction.atomic
def get_bulk_subject_colors(subjects) -> dict:
    """
    Map subject id -> color classes for many subjects at once.
    Existing mappings are fetched in one query; missing ones are assigned
    sequentially in the order the subjects were given.
    """
    subjects = list(subjects)
    colors = {}

    existing = SubjectColorMap.objects.filter(
        subject_id__in=[s.id for s in subjects]
    )
    for mapping in existing:
        colors[mapping.subject_id] = subject_color(mapping.color_index)

    missing = [s for s in subjects if s.id not in colors]
    if not missing:
        return colors

    next_index = _next_color_index()
    for subject in missing:
        if subject.id in colors:
            continue
        SubjectColorMap.objects.create(subject=subject, color_index=next_index)
        colors[subject.id] = subject_color(next_index)
        next_index += 1

    return colors
