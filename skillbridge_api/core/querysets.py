import json

from django.db.models import Q


def json_list_overlaps(field, values):
    """
    Q matching rows whose JSON string list `field` shares at least one
    entry with `values`, case-insensitively.

    Entries are matched as quoted JSON strings so "Java" does not match
    "JavaScript". Non-ASCII entries are also matched in their `\\uXXXX`
    escaped form, which is how backends storing JSON as text keep them.
    """
    query = Q()
    for value in values:
        value = value.strip()
        if not value:
            continue
        needles = {f'"{value}"', json.dumps(value)}
        for needle in needles:
            query |= Q(**{f'{field}__icontains': needle})
    return query


def split_csv(raw):
    """`"python, react"` -> `['python', 'react']`; empty input gives `[]`."""
    if not raw:
        return []
    if isinstance(raw, (list, tuple)):
        return [item.strip() for item in raw if item and item.strip()]
    return [item.strip() for item in raw.split(',') if item.strip()]
