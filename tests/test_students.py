from hypothesis import given
from hypothesis import strategies as st

from dsakit.students import Student, StudentList, format_student


def _roster():
    return StudentList(
        [
            Student(30, "Asha", 8.5, "CSE"),
            Student(10, "Ravi", 7.25, "ECE"),
            Student(20, "Mina", 9.0, "ME"),
        ]
    )


def test_find_existing_student():
    roster = _roster()
    found = roster.find(10)
    assert found == Student(10, "Ravi", 7.25, "ECE")


def test_find_missing_student_returns_none():
    assert _roster().find(99) is None


def test_find_returns_first_match():
    roster = StudentList([Student(1, "A", 1.0, "X"), Student(1, "B", 2.0, "Y")])
    assert roster.find(1).name == "A"


def test_sort_by_regno():
    roster = _roster()
    roster.sort_by_regno()
    assert [s.regno for s in roster] == [10, 20, 30]
    assert len(roster) == 3


def test_sort_is_stable():
    roster = StudentList(
        [Student(2, "first", 1.0, "X"), Student(1, "z", 1.0, "X"), Student(2, "second", 1.0, "X")]
    )
    roster.sort_by_regno()
    assert [s.name for s in roster] == ["z", "first", "second"]


def test_format_student_layout():
    text = format_student(Student(10, "Ravi", 7.25, "ECE"))
    assert text.splitlines() == [
        "Registration no.: 10",
        "Name: Ravi",
        "CGPA: 7.250000",
        "Branch: ECE",
    ]


@given(st.lists(st.integers(0, 1000)))
def test_sort_orders_any_roster(numbers):
    roster = StudentList(Student(n, f"s{n}", 0.0, "B") for n in numbers)
    roster.sort_by_regno()
    assert [s.regno for s in roster] == sorted(numbers)


def test_empty_roster():
    roster = StudentList()
    assert len(roster) == 0
    assert roster.find(1) is None