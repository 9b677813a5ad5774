"""A class roll that is written to and read from indented XML."""

import argparse
import re
import sys
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

_ESCAPES = {
    '"': "&#34;", "'": "&#39;", "&": "&amp;", "<": "&lt;", ">": "&gt;",
    "\t": "&#x9;", "\n": "&#xA;", "\r": "&#xD;",
}
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(1 << 63), (1 << 63) - 1


def _escape(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def _check_int(value: int, what: str) -> int:
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"{what} {value} out of range")
    return value


def _direct_text(element) -> str:
    return (element.text or "") + "".join(child.tail or "" for child in element)


def _parse_int(element) -> int:
    text = _direct_text(element).strip()
    if not text:
        return 0
    if _INT_RE.fullmatch(text) is None:
        raise ValueError(f"invalid integer in <{element.tag}>: {text!r}")
    return _check_int(int(text), element.tag)


@dataclass
class Student:
    name: str = ""
    age: int = 0
    number: int = 0


@dataclass
class Classroom:
    """A named class of a grade with its students."""

    students: list[Student] = field(default_factory=list)
    name: str = ""
    grade: int = 0

    def to_xml(self) -> str:
        """Render as a <Class> element indented by four spaces, one <Students> per student."""
        lines = ["<Class>"]
        for student in self.students:
            lines += [
                "    <Students>",
                f"        <Name>{_escape(student.name)}</Name>",
                f"        <Age>{_check_int(student.age, 'Age')}</Age>",
                f"        <Number>{_check_int(student.number, 'Number')}</Number>",
                "    </Students>",
            ]
        lines += [
            f"    <Name>{_escape(self.name)}</Name>",
            f"    <Grade>{_check_int(self.grade, 'Grade')}</Grade>",
            "</Class>",
        ]
        return "\n".join(lines)

    @classmethod
    def from_xml(cls, text) -> "Classroom":
        """Read a class from XML; unknown elements are ignored, missing ones keep defaults."""
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            raise ValueError(f"malformed XML: {exc}") from None
        classroom = cls()
        for child in root:
            if child.tag == "Students":
                classroom.students.append(_read_student(child))
            elif child.tag == "Name":
                classroom.name = _direct_text(child)
            elif child.tag == "Grade":
                classroom.grade = _parse_int(child)
        return classroom


def _read_student(element) -> Student:
    student = Student()
    for child in element:
        if child.tag == "Name":
            student.name = _direct_text(child)
        elif child.tag == "Age":
            student.age = _parse_int(child)
        elif child.tag == "Number":
            student.number = _parse_int(child)
    return student


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Write a class roll as XML and read it back.")
    parser.parse_args(argv)
    classroom = Classroom(
        students=[Student("jane", 12, 1), Student("zzz", 13, 2), Student("1231231", 14, 3)],
        name="class 1-2",
        grade=5,
    )
    text = classroom.to_xml()
    print(text)
    copy = Classroom.from_xml(text)
    copy.name = "class5-6"
    copy.grade = 6
    print("xxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx")
    print(copy.to_xml())
    return 0


if __name__ == "__main__":
    sys.exit(main())