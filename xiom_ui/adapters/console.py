"""Terminal prompts. The only module that reads stdin."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from xiom_ui.models.component import RegistryEntry

Reader = Callable[[str], str]


def _read(reader: Reader, prompt: str) -> str:
    """Read one answer; closed stdin (EOF) counts as a blank answer."""
    try:
        return reader(prompt)
    except EOFError:
        print()
        return ""


def ask_text(message: str, default: str = "", reader: Reader = input) -> str:
    suffix = f" ({default})" if default else ""
    answer = _read(reader, f"{message}{suffix} ").strip()
    return answer or default


def ask_confirm(message: str, default: bool = False, reader: Reader = input) -> bool:
    hint = "Y/n" if default else "y/N"
    answer = _read(reader, f"{message} [{hint}] ").strip().lower()
    if not answer:
        return default
    return answer in {"y", "yes"}


def ask_select(
    message: str,
    choices: Sequence[tuple[str, str]],
    default: int = 0,
    reader: Reader = input,
) -> str:
    """Pick one of (title, value) pairs by number or value; blank picks default."""
    print(message)
    for i, (title, _value) in enumerate(choices, start=1):
        print(f"  {i}) {title}")
    answer = _read(reader, f"Choose 1-{len(choices)} ({default + 1}) ").strip()
    if not answer:
        return choices[default][1]
    if answer.isdigit() and 1 <= int(answer) <= len(choices):
        return choices[int(answer) - 1][1]
    for title, value in choices:
        if answer.lower() in {title.lower(), value.lower()}:
            return value
    return choices[default][1]


def _pick(token: str, entries: Sequence[RegistryEntry]) -> Optional[str]:
    if token.isdigit() and 1 <= int(token) <= len(entries):
        return entries[int(token) - 1].name
    for e in entries:
        if e.name == token:
            return e.name
    return None


def ask_components(entries: list[RegistryEntry], reader: Reader = input) -> list[str]:
    """Multiselect over registry entries: comma/space separated names or numbers."""
    if not entries:
        print("The registry has no components.")
        return []
    print("Which components would you like to add?")
    width = max(len(e.name) for e in entries)
    for i, e in enumerate(entries, start=1):
        desc = f"  {e.description}" if e.description else ""
        print(f"  {i:>2}) {e.name.ljust(width)}{desc}")
    answer = _read(reader, "Names or numbers, separated by commas or spaces: ")
    selected: list[str] = []
    for token in answer.replace(",", " ").split():
        name = _pick(token.strip(), entries)
        if name is None:
            print(f"Ignoring unknown choice {token!r}")
        elif name not in selected:
            selected.append(name)
    return selected


def confirm_overwrite(file_name: str) -> bool:
    return ask_confirm(f"{file_name} already exists. Overwrite?", default=False)
