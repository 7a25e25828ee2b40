NAMESPACE_UNRESOLVED = (
    "Cannot resolve the declaring namespace of controller '{controller}'"
)
VIEW_PATH_EMPTY = "View path is empty"
VIEW_PATH_TRAVERSAL = "View path '{path}' escapes the project root"
VIEW_PATH_INVALID_CHARS = "View path '{path}' contains characters not allowed in a virtual path"
VIEW_PATH_NOT_VIRTUAL = "View path '{path}' is not a virtual path (expected '~/...')"
TYPE_REF_EMPTY = "Type reference is empty"
TYPE_REF_UNBALANCED = "Unbalanced generic brackets in type reference '{text}'"
TYPE_REF_TRAILING = "Unexpected '{token}' in type reference '{text}'"


class MvcCodegenError(ValueError):
    """Base class for input errors detected while generating controllers."""


class NamespaceResolutionError(MvcCodegenError):
    """The declaring namespace of a controller is unknown."""


class InvalidViewPathError(MvcCodegenError):
    """A template file path cannot be expressed as a virtual path."""


class InvalidTypeReferenceError(MvcCodegenError):
    """A type reference string could not be parsed."""
