"""
Kernel Component: Description Renderer

Human-readable forms of a decoded operation list:
  - terse: "XOR 3 ADD 5 ..." for list displays
  - code:  one C-like line per operation for detail displays

The code form models the mix as a cyclic Feistel chain. The receiver starts
at "a" and the argument at the last term, both advancing by one per line.
"""

from ..core.registry import param_registry
from .definition import Operation, decode_definition
from .types import lookup_type


VARIABLES = param_registry()["pseudocode_variables"]


def terse_string(operations: list[Operation]) -> str:
    """
    Return "XOR r" / "ADD r" per operation, joined by single spaces.

    Example:
        >>> terse_string([{"is_xor": True, "rotation": 3}, {"is_xor": False, "rotation": 0}])
        'XOR 3 ADD 0'
    """
    return " ".join(
        f"{'XOR' if op['is_xor'] else 'ADD'} {op['rotation']}"
        for op in operations
    )


def code_string(operations: list[Operation], term_count: int) -> str:
    """
    Return pseudocode for the operation chain over term_count variables.

    Each line is "recv ^= ROTL(arg,r);" (XOR) or "recv += ROTL(arg,r);" (ADD),
    newline-terminated.

    Args:
        operations: Decoded operations in execution order.
        term_count: Number of working variables (1..4).

    Returns:
        str: len(operations) lines.

    Raises:
        ValueError: If term_count is outside 1..len(VARIABLES).

    Example (8x2, a ^= ..., then b += ...):
        a ^= ROTL(b,3);
        b += ROTL(a,5);
    """
    if not 1 <= term_count <= len(VARIABLES):
        raise ValueError(
            f"term_count must be in 1..{len(VARIABLES)}, got {term_count}"
        )

    receiver = 0
    argument = term_count - 1

    lines = []
    for op in operations:
        symbol = "^=" if op["is_xor"] else "+="
        lines.append(
            f"{VARIABLES[receiver]} {symbol} ROTL({VARIABLES[argument]},{op['rotation']});\n"
        )
        receiver = (receiver + 1) % term_count
        argument = (argument + 1) % term_count

    return "".join(lines)


def describe_mix(type_id: str, definition: int) -> dict:
    """
    Decode and render a packed definition for display.

    Returns:
        dict: {type_id, definition, operations, terse, code}

    Raises:
        UnknownTypeError: If type_id is not registered.
    """
    info = lookup_type(type_id)
    operations = decode_definition(type_id, definition)
    return {
        "type_id": type_id,
        "definition": definition,
        "operations": operations,
        "terse": terse_string(operations),
        "code": code_string(operations, info["term_count"]),
    }
