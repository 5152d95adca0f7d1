"""Levenshtein edit distance."""


def levenshtein(a, b):
    """Number of single-character insertions, deletions and substitutions
    needed to turn a into b. Case-sensitive."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            if ca == cb:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1],   # substitution
                                       previous[j],       # deletion
                                       current[j - 1]))   # insertion
        previous = current
    return previous[-1]
