"""Closed code tables and the tri-state flag used by catalog models."""
import enum


class CodeEnum(enum.Enum):
    """Enumeration whose members persist as a string code."""

    def __init__(self, code, friendly_type):
        self.code = code
        self.friendly_type = friendly_type

    @classmethod
    def get_instance(cls, code):
        """Return the member stored under ``code``, or None if there is none."""
        if code is None:
            return None
        for member in cls:
            if member.code == code:
                return member
        return None

    @staticmethod
    def to_code(member):
        return None if member is None else member.code

    @classmethod
    def choices(cls):
        return [{"code": m.code, "friendly_type": m.friendly_type} for m in cls]


class ProductOptionType(CodeEnum):
    TEXT = ("TEXT", "Text")
    TEXTAREA = ("TEXTAREA", "Text Area")
    SELECT = ("SELECT", "Select")
    COLOR = ("COLOR", "Color")
    SIZE = ("SIZE", "Size")
    DATE = ("DATE", "Date")
    BOOLEAN = ("BOOLEAN", "Boolean")
    DECIMAL = ("DECIMAL", "Decimal")
    INTEGER = ("INTEGER", "Integer")
    INPUT = ("INPUT", "Input")
    PRODUCT = ("PRODUCT", "Product")


class ProductOptionValidationType(CodeEnum):
    REGEX = ("REGEX", "Regular Expression")


class TriState(enum.Enum):
    """A nullable boolean where "never set" is its own state."""

    UNSET = None
    TRUE = True
    FALSE = False

    @classmethod
    def of(cls, value):
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.UNSET
        return cls.TRUE if value else cls.FALSE

    def resolve(self, default):
        if self is TriState.UNSET:
            return default
        return self.value
