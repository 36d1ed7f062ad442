# What it does: Defines the exceptions raised while validating and creating tags
# How it does: Every error carries an optional byte offset into the tag document and renders itself the way git does ("char<offset>: <cause>")
# What data structure it uses: A small class hierarchy rooted at TagError


class TagError(Exception):
    def __init__(self, message, offset=None):
        super().__init__(message)
        self.message = message
        self.offset = offset

    def __str__(self):
        if self.offset is None:
            return self.message
        return f"char{self.offset}: {self.message}"


class TagSizeError(TagError):
    pass


class TagSyntaxError(TagError):
    pass


class TagLengthError(TagError):
    pass


class ObjectLookupError(TagError, LookupError):
    pass


class IdentityError(TagError):
    pass


class TagCreationError(TagError):
    pass
