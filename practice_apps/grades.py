"""Interactive grade recorder: collects subject grades and prints a summary."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator, Mapping

_BLUE = "\033[34m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

_RULE = "────────────────────────────────────"
_INTEGER = re.compile(r"[+-]?\d+")

MIN_GRADE = 0
MAX_GRADE = 100


class GradeError(ValueError):
    """Raised when a subject/grade entry cannot be accepted."""


def calculate_average(total: int, count: int) -> float:
    """Return the average grade, truncated to a whole number before conversion."""
    return float(int(total / count) if (total < 0) != (count < 0) else total // count)


def parse_entry(line: str, subjects: Mapping[str, int]) -> tuple[str, int]:
    """Parse a "Subject Grade" line, validating it against grades already recorded."""
    fields = line.split()
    if len(fields) < 2:
        raise GradeError("Invalid input! Please enter in format: Subject Grade")
    subject, grade_text = fields[0], fields[1]
    if subjects.get(subject, 0) != 0:
        raise GradeError("You cannot have multiple grades for the same subject!")
    if not _INTEGER.fullmatch(grade_text):
        raise GradeError("Invalid grade! Must be a number.")
    grade = int(grade_text)
    if not MIN_GRADE <= grade <= MAX_GRADE:
        raise GradeError("Invalid grade! Must be between 0 and 100.")
    return subject, grade


def format_summary(name: str, subjects: Mapping[str, int]) -> str:
    """Render the grade table and average for a student."""
    lines = [
        f"{_GREEN}\n Summary of Grades for {name}:{_RESET}",
        _RULE,
    ]
    lines.extend(
        f"{_BLUE} {subject:<15s} : {grade:3d}{_RESET}" for subject, grade in subjects.items()
    )
    average = calculate_average(sum(subjects.values()), len(subjects))
    lines.append(_RULE)
    lines.append(f"{_BLUE} {'Average':<15s} : {average:3f}{_RESET}")
    lines.append(_RULE)
    return "\n".join(lines)


def _prompt(lines: Iterator[str], text: str) -> str:
    print(text, end="", flush=True)
    try:
        return next(lines).strip()
    except StopIteration:
        raise EOFError from None


def main(argv: list[str] | None = None) -> int:
    """Run the interactive grade recorder on standard input and output."""
    lines = iter(sys.stdin)
    try:
        name = _prompt(lines, f"{_YELLOW}Enter Your Name: {_RESET}")
        count_text = _prompt(lines, f"{_BLUE}Enter how many subjects you took: {_RESET}")
        count_fields = count_text.split()
        if not count_fields or not _INTEGER.fullmatch(count_fields[0]) or int(count_fields[0]) < 1:
            print(f"{_RED}Invalid number of subjects!{_RESET}")
            return 1
        count = int(count_fields[0])

        print(f"{_GREEN}\n Now, enter the subject and the grade. Example: English 85{_RESET}")
        subjects: dict[str, int] = {}
        entered = 0
        while entered < count:
            line = _prompt(lines, f"{_YELLOW}Enter subject No. {entered + 1}: {_RESET}")
            try:
                subject, grade = parse_entry(line, subjects)
            except GradeError as exc:
                print(f"{_RED}{exc}{_RESET}")
                continue
            subjects[subject] = grade
            entered += 1
    except EOFError:
        print()
        return 1

    print(format_summary(name, subjects))
    print(f"{_GREEN}Thank you for using the grade recorder!{_RESET}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())