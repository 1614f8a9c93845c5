class DictionaryError(Exception):
    """Base exception for dictionary-related errors"""
    pass

class LengthMismatchError(DictionaryError, ValueError):
    """Exception raised when key and value sequences differ in length"""
    pass

class SequenceShapeError(DictionaryError, ValueError):
    """Exception raised when an array operand is not one-dimensional"""
    pass

class KeyNotFoundError(DictionaryError, KeyError):
    """Exception raised when a required key is not present"""
    pass
