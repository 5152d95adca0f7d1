"""Dotted-path resolution against the interpreter context.

    >>> resolve("user.profile.age", {"user": {"profile": {"age": 30}}})
    30

A level can be a mapping (looked up by key), a list or tuple (looked up by
decimal index) or any other object (looked up by attribute). Failures come
back as ErrorResult values; resolve() never raises and never mutates the
context.
"""

from collections.abc import Mapping

from talktocode.results import ErrorKind, ErrorResult

_NOT_CONTAINERS = (str, bytes, bytearray, int, float, complex, bool,
                   list, tuple, set, frozenset)


def resolve(path, root):
    """Walk path through root. Returns the value found, or an ErrorResult."""
    from talktocode.suggest import suggest_properties

    try:
        current = root
        for part in path.split("."):
            segment = part.strip()
            if current is None:
                return ErrorResult(
                    kind=ErrorKind.MISSING_CONTAINER,
                    message=f"Cannot read property '{segment}' of None",
                    path=path)
            found, value = lookup(current, segment)
            if not found:
                return ErrorResult(
                    kind=ErrorKind.UNRESOLVED_PATH,
                    message=f'Property "{segment}" not found',
                    suggestions=suggest_properties(segment, current),
                    path=path)
            current = value
        return current
    except Exception as e:
        return ErrorResult(kind=ErrorKind.RESOLUTION_FAULT, message=str(e) or type(e).__name__,
                           path=path)


def lookup(container, key):
    """Look up one key on one level. Returns (found, value)."""
    if isinstance(container, Mapping):
        if key in container:
            return True, container[key]
        return False, None
    if isinstance(container, (list, tuple)):
        if key.isdecimal() and int(key) < len(container):
            return True, container[int(key)]
        return False, None
    if key and hasattr(container, key):
        return True, getattr(container, key)
    return False, None


def is_container(value):
    """True for values whose keys are worth enumerating: mappings and
    attribute-bearing objects such as modules, namespaces and instances."""
    if isinstance(value, Mapping):
        return True
    if value is None or isinstance(value, _NOT_CONTAINERS) or callable(value):
        return False
    return hasattr(value, "__dict__")


def container_keys(obj):
    """Immediate keys of one level, in natural enumeration order."""
    if isinstance(obj, Mapping):
        return [str(k) for k in obj.keys()]
    if isinstance(obj, (list, tuple)):
        return [str(i) for i in range(len(obj))]
    if obj is None:
        return []
    # Own attributes in assignment order first, then whatever else dir() finds.
    own = getattr(obj, "__dict__", None)
    names = [k for k in own if isinstance(k, str)] if isinstance(own, Mapping) else []
    seen = set(names)
    names.extend(name for name in dir(obj) if name not in seen)
    return [name for name in names if not name.startswith("_")]


def all_key_paths(obj, max_depth=3, prefix="", depth=0):
    """Every dotted key path reachable from obj, descending into containers
    only, at most max_depth levels deep.

    The depth bound is also what stops the walk on cyclic structures.
    """
    if depth >= max_depth or not is_container(obj):
        return []
    paths = []
    for key in container_keys(obj):
        full_key = f"{prefix}.{key}" if prefix else key
        paths.append(full_key)
        try:
            _, value = lookup(obj, key)
        except Exception:
            # A raising property is not worth descending into.
            continue
        if is_container(value):
            paths.extend(all_key_paths(value, max_depth, full_key, depth + 1))
    return paths
