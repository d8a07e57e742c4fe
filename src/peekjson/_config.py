from dataclasses import dataclass

# Three interpreter frames per nesting level
# (read_value -> read_object -> read_attribute) must fit the default
# recursion limit.
DEFAULT_MAX_DEPTH = 200


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures JSON parsing behavior with immutable settings.

    strict rejects anything but whitespace after the top-level document;
    max_depth bounds how deeply arrays and objects may nest (None disables
    the guard and leaves the interpreter's recursion limit as the bound).
    """

    strict: bool = False
    max_depth: int | None = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(
                self.max_depth, int
            ):
                raise TypeError("max_depth must be an integer or None")
            if self.max_depth < 1:
                raise ValueError("max_depth must be at least 1")
