"""Function invocation with failure isolation."""

from talktocode.results import ErrorKind, ErrorResult


def invoke(fn, args=()):
    """Call fn(*args). An exception raised by fn comes back as an ErrorResult.

    Side effects fn performed before raising are not undone.
    """
    args = list(args)
    try:
        return fn(*args)
    except Exception as e:
        return ErrorResult(kind=ErrorKind.INVOCATION_FAULT,
                           message=str(e) or type(e).__name__,
                           args=args)
