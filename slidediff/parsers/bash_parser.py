"""Parser for shell commands in bash code blocks."""

from slidediff.schemas.bash_schema import BashCommand

_CONTINUATION_STARTS = ("|", "&&", "||")
_CONTINUATION_ENDS = ("|", "&&", "||", ";")


def parse_bash_commands(code: str) -> list[BashCommand]:
    """Extract individual commands from a bash code block.

    - A blank line ends the current command (unless a trailing backslash
      continues it)
    - A comment line before a command becomes its description
    - Backslash continuations, and lines joined by pipes or logical
      operators, are merged into a single command
    """
    commands: list[BashCommand] = []
    current = ""
    start_line = 0
    description = ""
    in_backslash = False

    def flush() -> None:
        if current.strip():
            commands.append(
                BashCommand(
                    command=current.strip(),
                    description=description or None,
                    line=start_line + 1,
                )
            )

    for i, raw_line in enumerate(code.split("\n")):
        line = raw_line.strip()

        if not line:
            if current and not in_backslash:
                flush()
                current = ""
                description = ""
            continue

        if line.startswith("#"):
            if not current:
                description = line[1:].strip()
            continue

        ends_with_backslash = raw_line.rstrip().endswith("\\")
        if ends_with_backslash or in_backslash:
            if not current:
                start_line = i
            if ends_with_backslash:
                part = raw_line.rstrip()[:-1].strip()
                in_backslash = True
            else:
                part = line
                in_backslash = False
            current = f"{current} {part}" if current else part
            continue

        if current and (
            line.startswith(_CONTINUATION_STARTS) or current.strip().endswith(_CONTINUATION_ENDS)
        ):
            current += line if current.endswith(" ") else f" {line}"
            continue

        if current:
            flush()
            description = ""
        start_line = i
        current = line

    flush()
    return commands


def get_command_display_name(command: BashCommand, max_length: int = 50) -> str:
    """Short label for a command: its description, else its text, truncated."""
    text = command.description or command.command
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."
