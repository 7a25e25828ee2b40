from enum import StrEnum

ENCODING_UTF8 = "utf-8"
SEPARATOR_DOT = "."
SEPARATOR_SLASH = "/"
VIRTUAL_PATH_ROOT = "~"


class Modifier(StrEnum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    INTERNAL = "internal"
    STATIC = "static"
    READONLY = "readonly"
    CONST = "const"
    PARTIAL = "partial"
    VIRTUAL = "virtual"
    OVERRIDE = "override"


class Accessibility(StrEnum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    INTERNAL = "internal"
    PROTECTED_INTERNAL = "protected_internal"
    PRIVATE_PROTECTED = "private_protected"


class MethodKind(StrEnum):
    ORDINARY = "ordinary"
    PROPERTY_ACCESSOR = "property_accessor"
    EVENT_ACCESSOR = "event_accessor"
    OPERATOR = "operator"
    CONVERSION = "conversion"
    EXPLICIT_INTERFACE = "explicit_interface"


class ConstructorInitializerKind(StrEnum):
    BASE = "base"
    THIS = "this"


# Framework type and attribute names
ATTR_GENERATED_CODE = "GeneratedCode"
ATTR_DEBUGGER_NON_USER_CODE = "DebuggerNonUserCode"
ATTR_NON_ACTION = "NonAction"

TYPE_STRING = "string"
TYPE_VOID = "void"
TYPE_TASK = "Task"
TYPE_VALUE_TASK = "ValueTask"

# Members of the generated partial controller
MEMBER_ACTIONS = "Actions"
MEMBER_AREA = "Area"
MEMBER_NAME = "Name"
MEMBER_NAME_CONST = "NameConst"
MEMBER_ACTION_NAMES = "ActionNames"
MEMBER_VIEWS = "Views"
MEMBER_VIEW_NAMES = "ViewNames"
FIELD_ACTIONS_CACHE = "s_actions"
FIELD_VIEWS_CACHE = "s_views"
FIELD_VIEW_NAMES_CACHE = "s_ViewNames"

CLASS_ACTION_NAMES = "ActionNamesClass"
CLASS_ACTION_NAME_CONSTANTS = "ActionNameConstants"
CLASS_VIEWS = "ViewsClass"
CLASS_VIEW_NAMES = "_ViewNamesClass"
CLASS_PAGES = "Pages"
FOLDER_CLASS_SUFFIX = "Class"
VIEW_MEMBER_SUFFIX = "_"

# Redirect helpers
METHOD_REDIRECT_TO_ACTION = "RedirectToAction"
METHOD_REDIRECT_TO_ACTION_PERMANENT = "RedirectToActionPermanent"
METHOD_REDIRECT_TO_ROUTE = "RedirectToRoute"
METHOD_REDIRECT_TO_ROUTE_PERMANENT = "RedirectToRoutePermanent"
METHOD_GET_RESULT = "GetR4MvcResult"
METHOD_FROM_RESULT = "FromResult"
PROPERTY_ROUTE_VALUES = "RouteValueDictionary"
PROPERTY_TASK_RESULT = "Result"

PARAM_RESULT = "result"
PARAM_TASK_RESULT = "taskResult"
PARAM_DUMMY = "d"
LOCAL_CALL_INFO = "callInfo"
MEMBER_DUMMY_INSTANCE = "Instance"

IDENTIFIER_FALLBACK = "_"
