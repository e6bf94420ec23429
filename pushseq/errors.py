import inspect
import threading


class EvaluationError(Exception):
    """Raised when evaluating an element fails."""


# Settings --------------------------------------------------------------------

def seterr(evaluation=None):
    """Set how errors are handled.

    Args:
        evaluation (str): how errors from user code triggered by PushSeq are
            propagated:

            - `'wrap'`: raise :class:`EvaluationError` with original error as
              its cause.
            - `'passthrough'`: let the error propagate through PushSeq code,
              might facilitate step-by-step debugging.
            - `None` leave unchanged and return current setting
    Returns:
        The setting value.
    """
    if evaluation == 'wrap':
        error_config.passthrough = False
    elif evaluation == 'passthrough':
        error_config.passthrough = True
    elif evaluation is not None:
        raise ValueError("evaluation must be 'wrap' or 'passthrough'")

    return "passthrough" if error_config.passthrough else 'wrap'


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.passthrough = False


error_config = ErrorConfig()


# Helpers ---------------------------------------------------------------------

def unindent(lines):
    if lines is None:
        return []

    prefix = lines[0]
    while len(prefix) > 0 and not prefix.isspace():
        prefix = prefix[:-1]

    for line in lines[1:]:
        while not line.startswith(prefix):
            prefix = prefix[:-1]

    return [line[len(prefix):] for line in lines]


def format_stack(skip=1):
    out = ""
    for frame in inspect.stack()[:skip:-1]:
        _, filename, lineno, function, code_context, _ = frame
        out += "  File \"{}\", line {}, in {}\n".format(
            filename, lineno, function)
        for line in unindent(code_context):
            out += "    " + line

    return out


def reraise_err(item, error, owner, stack_desc=None):
    """(re)Raise an evaluation error with contextual debug info.

    Args:
        item (int): index of the item being processed.
        error (Exception): the original error.
        owner (str): name of the operator that failed.
        stack_desc (Optional[str]): formatted stack where the operator
            was created.
    """
    if seterr() == "passthrough" or isinstance(error, EvaluationError):
        raise error

    msg = "Failed to evaluate item {} in {}".format(item, owner)
    if stack_desc:
        msg += " created at:\n{}".format(stack_desc)

    raise EvaluationError(msg) from error


def guarded_call(owner, stack_desc, item, func, *args):
    """Call a user function, converting its failures into evaluation errors.

    One-shot terminal operations pass `stack_desc=None`, the stack of
    their caller is then only formatted if `func` fails.
    """
    try:
        return func(*args)
    except Exception as error:
        if stack_desc is None and seterr() == "wrap":
            stack_desc = format_stack(2)
        reraise_err(item, error, owner, stack_desc)
