"""
Seat Map Registry: which global seat ids belong to which table.

Seat ids are numbered along the venue plan, table by table. Clients use
this to translate a clicked seat into a {table_id, seat_id} pair; the
booking service never looks inside seat ids.
"""

from typing import Optional

# table number -> (first seat number, seat count)
_LAYOUT: dict[int, tuple[int, int]] = {}

# T1-T11: bottom row, 8 seats each
for _n in range(1, 12):
    _LAYOUT[_n] = (1 + (_n - 1) * 8, 8)
# T12-T22: top row, 16 seats each
for _n in range(12, 23):
    _LAYOUT[_n] = (89 + (_n - 12) * 16, 16)
# T23-T31: left column, 12 seats each
for _n in range(23, 32):
    _LAYOUT[_n] = (265 + (_n - 23) * 12, 12)
_LAYOUT[32] = (373, 8)
# T33-T40: right column, 16 seats each
for _n in range(33, 41):
    _LAYOUT[_n] = (381 + (_n - 33) * 16, 16)
del _n


def _table_number(table_id: str) -> Optional[int]:
    if not table_id or table_id[0] not in "Tt" or not table_id[1:].isdigit():
        return None
    return int(table_id[1:])


def table_id_to_seat_ids(table_id: str) -> Optional[list[str]]:
    """Ordered seat ids for ``table_id`` ("T31"), or None for an unknown table."""
    number = _table_number(table_id)
    if number not in _LAYOUT:
        return None
    first, count = _LAYOUT[number]
    return [str(first + position) for position in range(count)]


def table_ids() -> list[str]:
    return [f"T{number}" for number in sorted(_LAYOUT)]


def seat_map() -> dict[str, list[str]]:
    return {table_id: table_id_to_seat_ids(table_id) for table_id in table_ids()}
