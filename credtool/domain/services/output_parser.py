"""Domain service for parsing gnu-pw-mgr output."""

import re
from typing import ClassVar

from ..entities import CredentialField, SeedEntry
from ..exceptions import IndexOutOfRangeError, MalformedOutputError, NoMatchError
from ..value_objects import SeedSelector


class OutputParser:
    """
    Extracts credential fields from the text printed by the password tool.

    Derive-mode output is one ``<seed-tag> <password>`` line per seed.
    Lookup-mode output additionally carries a ``hint: <login> pw:`` header.
    """

    HINT_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"hint:\s*(\S+)\s*pw:")

    def parse_password(self, output: str, seed: SeedSelector) -> CredentialField:
        """
        Extract the password for the selected seed.

        Args:
            output: Captured stdout of the derive-mode invocation.
            seed: Which seed line to use; 0 treats the whole output as one line.

        Returns:
            The last whitespace-delimited token of the selected line.

        Raises:
            IndexOutOfRangeError: If the output has fewer lines than requested.
            MalformedOutputError: If the selected line has no tokens.
        """
        if seed.is_most_recent:
            line = output
        else:
            lines = self._split_lines(output)
            if seed.value > len(lines):
                msg = f"Seed {seed.value} requested but tool printed {len(lines)} line(s)"
                raise IndexOutOfRangeError(msg)
            line = lines[seed.line_index]

        tokens = line.split()
        if not tokens:
            msg = "Password line is empty"
            raise MalformedOutputError(msg)

        return CredentialField.password(tokens[-1])

    def parse_username(self, output: str) -> CredentialField:
        """
        Extract the username hint from the last ``hint: ... pw:`` occurrence.

        Raises:
            NoMatchError: If no hint is present.
        """
        matches = self.HINT_PATTERN.findall(output)
        if not matches:
            msg = "No 'hint: <name> pw:' entry in tool output"
            raise NoMatchError(msg)
        return CredentialField.username(matches[-1])

    def parse_seeds(self, output: str) -> list[SeedEntry]:
        """List seed tags with the selector index of each line."""
        entries: list[SeedEntry] = []
        for number, line in enumerate(self._split_lines(output), start=1):
            tokens = line.split()
            # A seed line needs both a tag and a password
            if len(tokens) >= 2:
                entries.append(SeedEntry(index=number, tag=tokens[0]))
        return entries

    @staticmethod
    def _split_lines(output: str) -> list[str]:
        """Split on newlines, not counting the empty piece after a final newline."""
        lines = output.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return lines
