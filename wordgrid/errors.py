class GridError(ValueError):
    """Raised when a grid cannot be constructed."""


class ShapeMismatch(GridError):
    def __init__(self, width: int, height: int, actual: int):
        self.width = width
        self.height = height
        self.expected = width * height
        self.actual = actual
        super().__init__(
            f"Grid length should be {width} (width) * {height} (height) = {self.expected}, not {actual}"
        )


class InvalidCharacter(GridError):
    def __init__(self, characters: tuple[str, ...]):
        self.characters = characters
        super().__init__(f"Grid string contains invalid characters: {','.join(characters)}")


class InvalidWord(ValueError):
    """Raised in strict mode for words that can never be traced."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"Invalid candidate word: {word!r}")
