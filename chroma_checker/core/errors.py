"""Engine errors. Everything the engine raises on purpose derives from ChromaError."""


class ChromaError(Exception):
    """Base class for engine-level failures. Callers treat these as non-fatal."""


class EmptyPaletteError(ChromaError, ValueError):
    """An operation that needs at least one colour was given none."""

    def __init__(self, operation: str):
        super().__init__(f'{operation} requires at least one colour')
        self.operation = operation


class UnsupportedDeficiencyError(ChromaError, ValueError):
    """Unknown colour-vision deficiency tag."""

    def __init__(self, deficiency: str, supported: tuple[str, ...]):
        super().__init__(f'Unknown deficiency type: {deficiency!r}. Supported: {", ".join(supported)}')
        self.deficiency = deficiency
