from conslisp.errors import LispArityError


def check_arity(args: list, expected: int, name: str, at_least: bool = False) -> None:
    """Raise LispArityError unless `args` has exactly (or, with at_least, no fewer than) `expected` items."""
    given = len(args)
    if at_least:
        if given < expected:
            raise LispArityError(
                f"{name} requires at least {expected} parameter(s), {given} given"
            )
    elif given != expected:
        raise LispArityError(f"{name} requires {expected} parameter(s), {given} given")
