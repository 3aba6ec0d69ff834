"""Command-line front end of the ski school management tool."""

from __future__ import annotations

import argparse
import sys
from html.parser import HTMLParser
from typing import Optional

from .school import SkiSchool, StudentFileError

TITLE = "Skischule Verwaltung v1.0"
_RULE = "-" * 42

_MENU = (
    "1) Daten einlesen\n"
    "2) Schüler verteilen\n"
    "3) Kursübersicht anzeigen\n"
    "0) Beenden"
)


class _ReportRenderer(HTMLParser):
    """Turns the HTML course report into plain text lines."""

    _BLOCKS = ("h1", "h2", "p", "div", "li")

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._lines: list = []
        self._current: list = []
        self._counters: list = []

    def _flush(self) -> None:
        text = "".join(self._current).rstrip()
        if text.strip():
            self._lines.append(text)
        self._current = []

    def handle_starttag(self, tag, attrs) -> None:
        if tag in self._BLOCKS or tag == "br":
            self._flush()
        if tag == "ol":
            self._flush()
            self._counters.append(0)
        elif tag == "li":
            if self._counters:
                self._counters[-1] += 1
                self._current.append(f"  {self._counters[-1]}. ")
            else:
                self._current.append("  - ")
        elif tag == "hr":
            self._flush()
            self._lines.append(_RULE)

    def handle_endtag(self, tag) -> None:
        if tag in self._BLOCKS:
            self._flush()
        elif tag == "ol":
            self._flush()
            if self._counters:
                self._counters.pop()

    def handle_data(self, data) -> None:
        self._current.append(data)

    def render(self, html: str) -> str:
        self.feed(html)
        self.close()
        self._flush()
        return "\n".join(self._lines)


def _render(html: str) -> str:
    return _ReportRenderer().render(html)


class _Session:
    """The three actions of the tool, writing their results to stdout."""

    def __init__(self, html: bool) -> None:
        self.school = SkiSchool()
        self.html = html

    def load(self, path: str) -> None:
        count = self.school.read_student_file(path)
        print(f"Datei geladen: Es wurden {count} Schüler erfolgreich aus der Datei eingelesen.")
        print(self.school.raw_student_list(), end="")
        print("Daten erfolgreich geladen.")

    def distribute(self) -> None:
        assigned = self.school.distribute_students()
        waiting = len(self.school.waiting_list)
        print(f"Verteilung abgeschlossen. Zugeordnet: {assigned} | Warteliste: {waiting}")

    def report(self) -> None:
        html = self.school.show_all_courses()
        print(html if self.html else _render(html))


def _interactive(session: _Session) -> int:
    print(TITLE)
    while True:
        print(_MENU)
        try:
            choice = input("Auswahl: ").strip()
        except EOFError:
            print()
            return 0
        if choice == "0":
            return 0
        if choice == "1":
            try:
                path = input("Studentendatei: ").strip()
            except EOFError:
                print()
                return 0
            if not path:
                continue
            try:
                session.load(path)
            except StudentFileError as exc:
                print(f"Fehler: {exc}")
        elif choice == "2":
            session.distribute()
        elif choice == "3":
            session.report()
        else:
            print("Ungueltige Auswahl!")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="skischool", description=TITLE)
    parser.add_argument(
        "file",
        nargs="?",
        help="student file to load; without it an interactive menu is shown",
    )
    parser.add_argument(
        "--html",
        action="store_true",
        help="print the course overview as HTML instead of plain text",
    )
    return parser


def main(argv: Optional[list] = None) -> int:
    """Run the tool; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    session = _Session(html=args.html)
    if args.file is None:
        return _interactive(session)
    try:
        session.load(args.file)
    except StudentFileError as exc:
        print(f"Fehler: {exc}", file=sys.stderr)
        return 1
    session.distribute()
    session.report()
    return 0


if __name__ == "__main__":
    sys.exit(main())