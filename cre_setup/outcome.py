import sys
from dataclasses import dataclass
from typing import Any, Optional

from cre_setup.errors import SetupError


@dataclass(frozen=True)
class Outcome:
    """Result of running one flow; the entry point turns it into an exit code."""

    ok: bool
    message: str = ""
    hint: Optional[str] = None
    value: Any = None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    @classmethod
    def success(cls, message: str = "", value: Any = None) -> "Outcome":
        return cls(True, message, value=value)

    @classmethod
    def failure(cls, err: Exception) -> "Outcome":
        hint = err.hint if isinstance(err, SetupError) else None
        return cls(False, str(err), hint=hint)

    def report(self) -> int:
        """Print a failure (with its hint) to stderr and return the exit code."""
        if not self.ok:
            print(f"Error: {self.message}", file=sys.stderr)
            if self.hint:
                print(self.hint, file=sys.stderr)
        return self.exit_code
