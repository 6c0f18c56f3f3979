"""Validation errors raised by engine transitions."""


class WordBuilderError(ValueError):
    """Base class for rejected edits. The input state is left untouched."""

    code = "WORD_BUILDER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidLetter(WordBuilderError):
    """Letter is not in the candidate set for the requested position."""

    code = "INVALID_LETTER"

    def __init__(self, letter: str, position: str):
        super().__init__(f"Invalid letter '{letter}' for {position} position.")
        self.letter = letter
        self.position = position


class InvalidPosition(WordBuilderError):
    """Position tag is neither "prefix" nor "suffix"."""

    code = "INVALID_POSITION"

    def __init__(self, position: str):
        super().__init__(f"Invalid position '{position}'. Use 'prefix' or 'suffix'.")
        self.position = position


class InvalidIndex(WordBuilderError):
    """Removal index falls outside the current answer."""

    code = "INVALID_INDEX"

    def __init__(self, index: int, answer: str):
        super().__init__(f"Invalid index {index} for answer '{answer}'.")
        self.index = index
        self.answer = answer
