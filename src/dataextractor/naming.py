"""
Column naming conventions.

Columns may be named either ``var@Group`` or ``Group/var``. The
payload column of group ``G`` is the one column named ``G/...`` or
``...@G``; once it is found, every name is rewritten to the
``Group/var`` form.
"""

from collections.abc import Sequence


def in_group(name: str, group: str) -> bool:
    """Whether a column name belongs to ``group`` under either convention."""
    return name.startswith(f"{group}/") or name.endswith(f"@{group}")


def to_group_path(name: str) -> str:
    """
    Rewrite ``var@Group`` as ``Group/var``.

    Names without an ``@`` are returned unchanged.
    """
    variable, sep, group = name.partition("@")
    if not sep:
        return name
    return f"{group}/{variable}"


def find_payload_candidates(names: Sequence[str], group: str) -> list[int]:
    """Indices of all columns belonging to the payload group."""
    return [index for index, name in enumerate(names) if in_group(name, group)]
