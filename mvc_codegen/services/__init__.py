from .controller_generator import ControllerGenerator
from .declaration_query import ModelDeclarationQuery
from .protocols import DeclarationQueryProtocol, ViewLocatorProtocol
from .view_locator import ViewLocator

__all__ = [
    "ControllerGenerator",
    "DeclarationQueryProtocol",
    "ModelDeclarationQuery",
    "ViewLocator",
    "ViewLocatorProtocol",
]
