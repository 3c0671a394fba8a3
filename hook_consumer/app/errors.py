from typing import List, Tuple


class MalformedDurationError(ValueError):
    """Duration text is not a plain count of milliseconds."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"malformed duration {text!r}: expected a non-negative integer count of milliseconds")


class MalformedIntegerError(ValueError):
    def __init__(self, text: str, bits: int):
        self.text = text
        self.bits = bits
        super().__init__(f"malformed integer {text!r}: expected an unsigned {bits}-bit integer")


class ConfigError(RuntimeError):
    """Raised when the environment cannot be resolved into a Config.

    `problems` holds one (variable, raw_value, reason) triple per offending
    environment variable. Nothing is returned alongside it: resolution either
    succeeds for every field or fails as a whole.
    """

    def __init__(self, problems: List[Tuple[str, object, str]]):
        self.problems = list(problems)
        self.variable, self.value, _ = self.problems[0]
        detail = "; ".join(f"{var}={raw!r}: {reason}" for var, raw, reason in self.problems)
        super().__init__(f"invalid configuration: {detail}")
