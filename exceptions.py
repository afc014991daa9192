"""
Custom Exception Hierarchy

Distinguishes between:
1. Contract Violations (programming bugs that need fixing)
2. Business Logic Failures (expected runtime issues)

Style compilation and feature resolution contain every business failure and
surface it only as "use the fallback style". Contract violations are the one
category allowed to escape, because they mean a caller is wiring the
components together incorrectly.
"""


class ContractViolationError(TypeError):
    """
    Raised when component contracts are violated (programming bugs).

    These indicate:
    - Wrong types passed to the compiler or resolver
    - A feature object with no geometry type or property bag

    These should NEVER be caught and handled - they indicate bugs
    that need to be fixed in the calling code.

    Examples:
        - StyleCompiler.compile() receives a list instead of a document
        - resolve_style() receives a bare string instead of a feature
    """
    pass


class BusinessLogicError(Exception):
    """
    Base class for expected runtime business logic failures.

    These are normal failures that occur during system operation
    and should be handled gracefully without crashing.

    Subclasses represent specific categories of business failures.
    """
    pass


class StyleDocumentError(BusinessLogicError):
    """
    Style document could not be parsed or validated.

    Examples:
        - Response body is not valid JSON
        - Top-level JSON value is not an object
        - A layer entry has no id or type
        - "layers" is not an array

    The style service catches this and publishes an empty state, so every
    feature is drawn with its fallback style.
    """

    def __init__(self, message: str, details: str = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(Exception):
    """
    System configuration error.

    These are typically fatal and indicate misconfiguration
    that prevents the system from operating.

    Examples:
        - VT_STYLE_TEXT_OFFSET_SCALE is not a number
        - VT_STYLE_DEFAULT_TEXT_SIZE is zero or negative
    """
    pass
