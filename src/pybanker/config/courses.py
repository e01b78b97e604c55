"""Course layouts available to new games."""

from __future__ import annotations

from typing import Dict, Iterable, Sequence, Tuple, Union

from pybanker.models import Course, Hole


# (par, yards, difficulty rank) per hole, in hole order.
_HoleRow = Tuple[int, int, int]

_VALE: Tuple[_HoleRow, ...] = (
    (4, 334, 16),
    (4, 448, 6),
    (4, 345, 8),
    (4, 357, 14),
    (3, 148, 18),
    (5, 552, 4),
    (3, 190, 10),
    (4, 434, 2),
    (4, 337, 12),
)

_CREEK: Tuple[_HoleRow, ...] = (
    (4, 332, 11),
    (5, 517, 7),
    (3, 169, 17),
    (4, 302, 15),
    (4, 372, 3),
    (5, 490, 9),
    (4, 440, 1),
    (3, 177, 13),
    (4, 407, 5),
)

_RIDGE: Tuple[_HoleRow, ...] = (
    (4, 362, 3),
    (4, 393, 11),
    (3, 157, 17),
    (5, 538, 1),
    (4, 429, 5),
    (3, 188, 9),
    (4, 361, 15),
    (4, 365, 7),
    (5, 524, 13),
)


def _standalone(rows: Sequence[_HoleRow]) -> Tuple[_HoleRow, ...]:
    """Re-rank a nine played on its own so difficulty runs 1..9.

    The card ranks above are 18-hole ranks; ordering is preserved.
    """

    order = sorted(range(len(rows)), key=lambda index: rows[index][2])
    ranks = {index: position for position, index in enumerate(order, start=1)}
    return tuple((par, yards, ranks[index]) for index, (par, yards, _) in enumerate(rows))


def _shift(rows: Sequence[_HoleRow], ranks: Sequence[int]) -> Tuple[_HoleRow, ...]:
    return tuple((par, yards, rank) for (par, yards, _), rank in zip(rows, ranks))


def _build(course_id: int, name: str, rows: Sequence[_HoleRow]) -> Course:
    holes = [
        Hole(number=index, par=par, yards=yards, handicap=rank)
        for index, (par, yards, rank) in enumerate(rows, start=1)
    ]
    return Course(id=course_id, name=name, holes=holes)


_COURSES: Dict[int, Course] = {
    course.id: course
    for course in (
        _build(4, "EVCC Vale/Ridge", _VALE + _RIDGE),
        _build(8, "EVCC Vale/Creek", _VALE + _CREEK),
        # Ridge plays as the back nine here and takes the even ranks.
        _build(
            5,
            "EVCC - Creek/Ridge",
            _CREEK + _shift(_RIDGE, (4, 12, 18, 2, 6, 10, 16, 8, 14)),
        ),
        _build(1, "EVCC Vale", _standalone(_VALE)),
        _build(2, "EVCC Creek", _standalone(_CREEK)),
        _build(6, "EVCC Ridge", _standalone(_RIDGE)),
    )
}


def iter_courses() -> Iterable[Course]:
    """Return an iterator over every configured course."""

    return _COURSES.values()


def get_course(course_id: Union[int, str]) -> Course:
    """Fetch a course by id, raising KeyError if missing."""

    try:
        key = int(course_id)
    except (TypeError, ValueError):
        raise KeyError(f"No course configured for id={course_id!r}") from None
    if key not in _COURSES:
        raise KeyError(f"No course configured for id={course_id!r}")
    return _COURSES[key]
