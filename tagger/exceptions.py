class TaggingError(Exception):
    pass


class IncompleteActionError(TaggingError):
    pass


class InvalidVideoTimeError(TaggingError):
    pass


class UnknownLabelError(TaggingError):
    pass


class EventFileError(TaggingError):

    def __init__(self, problems):
        self.problems = list(problems)
        msg = "Event file validation failed:\n" + "\n".join(
            f"- {p}" for p in self.problems[:50]
        )
        super().__init__(msg)
