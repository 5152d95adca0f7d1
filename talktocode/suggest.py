"""Suggestions for names that failed to resolve.

A candidate is suggested when it contains the query (case-insensitively) or
is within MAX_SUGGESTION_DISTANCE edits of it.
"""

from talktocode.distance import levenshtein
from talktocode.resolve import all_key_paths, container_keys, resolve

MAX_SUGGESTION_DISTANCE = 3
MAX_KEY_DEPTH = 3


def is_similar(candidate, query):
    return (query.lower() in candidate.lower()
            or levenshtein(candidate, query) <= MAX_SUGGESTION_DISTANCE)


def suggest_properties(query, container):
    """Keys of container that look like query, in the container's own order."""
    return [key for key in container_keys(container) if is_similar(key, query)]


def suggest_functions(query, root, max_depth=None):
    """Dotted paths under root that hold callables whose last segment looks
    like the last segment of query."""
    if max_depth is None:
        max_depth = MAX_KEY_DEPTH
    wanted = query.rsplit(".", 1)[-1]
    suggestions = []
    for path in all_key_paths(root, max_depth):
        name = path.rsplit(".", 1)[-1]
        if not is_similar(name, wanted):
            continue
        if callable(resolve(path, root)):
            suggestions.append(path)
    return suggestions
