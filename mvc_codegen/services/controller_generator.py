"""
The controller generator: turns parsed controllers plus discovered views into
a tree of synthetic declarations.

For every controller it produces two classes inside the controller's
namespace:

-   A partial companion class with the controller's own name. It adds the
    constructors the override subclass needs, redirect helpers that accept
    typed action results, parameterless action stubs, action and controller
    name members, and the nested `ViewsClass`.
-   An override-hook subclass (`R4MVC_<Controller>`). It overrides every action
    so that calling it yields a call-info value describing the action instead
    of running it, and declares a bodiless partial `<Action>Override` hook the
    application can complete to observe those calls.

Members produced by a previous pass carry the generated marker and are left
out of the analysis, so regenerating from already generated sources yields the
same tree.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from mvc_codegen.codegen import builders as b
from mvc_codegen.codegen.class_builder import ClassBuilder
from mvc_codegen.codegen.views_class import build_views_class
from mvc_codegen.core import constants as cs
from mvc_codegen.core import logs as ls
from mvc_codegen.core.config import GeneratorSettings, settings
from mvc_codegen.data_models.declarations import ParsedController, ParsedMethod, TypeRef
from mvc_codegen.data_models.syntax import (
    AsCast,
    AttributeDecl,
    ClassDecl,
    Expression,
    MethodDecl,
    NamespaceDecl,
    ObjectCreation,
    ParameterDecl,
    ReturnStatement,
)
from mvc_codegen.data_models.views import View
from mvc_codegen.infrastructure.decorators import timing_decorator
from mvc_codegen.services.declaration_query import ModelDeclarationQuery
from mvc_codegen.services.protocols import DeclarationQueryProtocol, ViewLocatorProtocol
from mvc_codegen.utils.identifiers import trim_suffix


class ControllerGenerator:
    """
    Generates companion and override-hook classes for controllers.

    Args:
        view_locator (ViewLocatorProtocol): Source of the template files that
            make up each controller's `ViewsClass`.
        query (DeclarationQueryProtocol | None): Answers questions about the
            controller declarations. Defaults to reading the parsed records.
        config (GeneratorSettings | None): Naming conventions; defaults to the
            global settings.
    """

    def __init__(
        self,
        view_locator: ViewLocatorProtocol,
        query: DeclarationQueryProtocol | None = None,
        config: GeneratorSettings | None = None,
    ) -> None:
        self.view_locator = view_locator
        self.query = query or ModelDeclarationQuery()
        self.config = config or settings

    @property
    def generated_attributes(self) -> tuple[AttributeDecl, ...]:
        return (
            b.generated_code_attribute(
                self.config.GENERATED_CODE_TOOL, self.config.GENERATED_CODE_VERSION
            ),
            b.debug_non_user_code_attribute(),
        )

    @timing_decorator
    def generate_controllers(
        self, controllers: Iterable[ParsedController]
    ) -> list[NamespaceDecl]:
        """
        Runs one generation pass over a set of controllers.

        Controllers are grouped by namespace, so each namespace is declared
        once. Groups keep the order in which their first controller appeared,
        and controllers keep their order within a group. Views are located
        once and the resulting `ViewsClass` is shared by every controller.

        Args:
            controllers (Iterable[ParsedController]): The parsed controllers.

        Raises:
            NamespaceResolutionError: If any controller's namespace is unknown.
                Nothing is generated in that case.
            InvalidViewPathError: If a template path is malformed.

        Returns:
            list[NamespaceDecl]: One namespace per group, holding two classes
                per controller.
        """
        groups: dict[str, list[ParsedController]] = {}
        for controller in controllers:
            namespace = self.query.resolve_namespace(controller)
            groups.setdefault(namespace, []).append(controller)
        if not groups:
            return []

        views_class = self._views_class(self.view_locator.find_views())
        namespaces: list[NamespaceDecl] = []
        for namespace, group in groups.items():
            area = self.area_from_namespace(namespace)
            logger.info(
                ls.NAMESPACE_GROUP.format(
                    namespace=namespace, area=area, count=len(group)
                )
            )
            classes: list[ClassDecl] = []
            for controller in group:
                classes.append(self.generate_partial_controller(controller, views_class))
                classes.append(self.generate_r4_controller(controller))
            namespaces.append(b.create_namespace(namespace, classes))

        logger.info(
            ls.GENERATION_DONE.format(
                controllers=sum(len(group) for group in groups.values()),
                namespaces=len(namespaces),
            )
        )
        return namespaces

    def area_from_namespace(self, namespace: str) -> str:
        """
        Extracts the area from a namespace following `<...>.Areas.<X>.Controllers`.

        Returns:
            str: The area name, or an empty string if the namespace does not
                follow the areas convention.
        """
        parts = namespace.split(cs.SEPARATOR_DOT)
        for index in range(len(parts) - 2):
            if (
                parts[index] == self.config.AREAS_FOLDER
                and parts[index + 2] == self.config.CONTROLLERS_FOLDER
                and parts[index + 1]
            ):
                return parts[index + 1]
        return ""

    def get_controller_area(self, controller: ParsedController) -> str:
        return self.area_from_namespace(self.query.resolve_namespace(controller))

    def get_controller_name(self, controller: ParsedController) -> str:
        return trim_suffix(controller.name, self.config.CONTROLLER_SUFFIX)

    def get_r4_controller_class_name(self, controller: ParsedController) -> str:
        return f"{self.config.R4_CLASS_PREFIX}{controller.name}"

    def generate_partial_controller(
        self, controller: ParsedController, views_class: ClassDecl | None = None
    ) -> ClassDecl:
        """
        Builds the partial companion class for one controller.

        Args:
            controller (ParsedController): The controller.
            views_class (ClassDecl | None): A `ViewsClass` built earlier in the
                same pass. If omitted, views are located now.

        Returns:
            ClassDecl: The partial class.
        """
        area = self.get_controller_area(controller)
        controller_name = self.get_controller_name(controller)
        actions = self.query.action_methods(controller)
        logger.debug(
            ls.CONTROLLER_GENERATING.format(
                controller=controller.qualified_name, name=controller_name
            )
        )

        builder = self._new_class(
            controller.name,
            controller.type_parameters,
            cs.Modifier.PUBLIC,
            cs.Modifier.PARTIAL,
        )
        if not self.query.has_public_constructor(controller):
            logger.debug(ls.DEFAULT_CONSTRUCTOR_ADDED.format(controller=controller.name))
            builder.with_default_constructor(True, cs.Modifier.PUBLIC)
        builder.with_dummy_constructor(
            self.config.DUMMY_TYPE, True, cs.Modifier.PROTECTED
        )
        builder.with_members(*self._redirect_methods())
        builder.with_members(*self._action_stubs(controller, actions))

        action_names = _distinct_names(actions)
        (
            builder.with_property(
                cs.MEMBER_ACTIONS,
                controller.name,
                b.member_access(self.config.CANONICAL_ROOT, controller_name),
                cs.Modifier.PUBLIC,
            )
            .with_string_field(
                cs.MEMBER_AREA, area, True, cs.Modifier.PUBLIC, cs.Modifier.READONLY
            )
            .with_string_field(
                cs.MEMBER_NAME,
                controller_name,
                True,
                cs.Modifier.PUBLIC,
                cs.Modifier.READONLY,
            )
            .with_string_field(
                cs.MEMBER_NAME_CONST,
                controller_name,
                True,
                cs.Modifier.PUBLIC,
                cs.Modifier.CONST,
            )
            .with_cached_instance_field(cs.FIELD_ACTIONS_CACHE, cs.CLASS_ACTION_NAMES)
            .with_property(
                cs.MEMBER_ACTION_NAMES,
                cs.CLASS_ACTION_NAMES,
                b.identifier(cs.FIELD_ACTIONS_CACHE),
                cs.Modifier.PUBLIC,
            )
            .with_members(
                self._names_class(
                    cs.CLASS_ACTION_NAMES, action_names, cs.Modifier.READONLY
                ),
                self._names_class(
                    cs.CLASS_ACTION_NAME_CONSTANTS, action_names, cs.Modifier.CONST
                ),
            )
            .with_cached_instance_field(cs.FIELD_VIEWS_CACHE, cs.CLASS_VIEWS)
            .with_property(
                cs.MEMBER_VIEWS,
                cs.CLASS_VIEWS,
                b.identifier(cs.FIELD_VIEWS_CACHE),
                cs.Modifier.PUBLIC,
            )
        )
        if views_class is None:
            self.with_views_class(builder, self.view_locator.find_views())
        else:
            builder.with_members(views_class)
        return builder.build()

    def generate_r4_controller(self, controller: ParsedController) -> ClassDecl:
        """
        Builds the override-hook subclass for one controller.

        The subclass derives from the controller, chains to its marker
        constructor so the controller's own constructor logic never runs, and
        overrides every action to return a call-info value after invoking the
        matching `<Action>Override` partial hook.

        Args:
            controller (ParsedController): The controller.

        Returns:
            ClassDecl: The `R4MVC_<Controller>` class.
        """
        namespace = self.query.resolve_namespace(controller)
        base_type = f"{namespace}{cs.SEPARATOR_DOT}{controller.name}"
        if controller.type_parameters:
            base_type = f"{base_type}<{', '.join(controller.type_parameters)}>"

        builder = (
            self._new_class(
                self.get_r4_controller_class_name(controller),
                controller.type_parameters,
                cs.Modifier.PUBLIC,
                cs.Modifier.PARTIAL,
            )
            .with_attributes(*self.generated_attributes)
            .with_base_types(base_type)
            .with_dummy_base_constructor(self.config.DUMMY_TYPE, False, cs.Modifier.PUBLIC)
        )
        for action in self.query.action_methods(controller):
            builder.with_members(
                self._override_hook(action),
                self._action_override(controller, action),
            )
        return builder.build()

    def with_views_class(
        self, class_builder: ClassBuilder, views: Sequence[View]
    ) -> ClassBuilder:
        return class_builder.with_members(self._views_class(views))

    def unwrap_async_return_type(self, return_type: TypeRef) -> TypeRef | None:
        """
        Returns the value type of an async wrapper such as `Task<T>`.

        Returns:
            TypeRef | None: `T` for a recognised wrapper with exactly one type
                argument, otherwise None.
        """
        if (
            return_type.simple_name in self.config.ASYNC_WRAPPERS
            and len(return_type.type_arguments) == 1
            and not return_type.suffix
        ):
            return return_type.type_arguments[0]
        return None

    def _new_class(
        self, name: str, type_parameters: Sequence[str], *modifiers: cs.Modifier
    ) -> ClassBuilder:
        return ClassBuilder(
            name,
            type_parameters,
            *modifiers,
            generated_attributes=self.generated_attributes,
        )

    def _views_class(self, views: Sequence[View]) -> ClassDecl:
        return build_views_class(views, self.generated_attributes)

    def _call_info(self, action_name: str) -> ObjectCreation:
        return b.object_creation(
            self.config.CALL_INFO_CLASS,
            b.identifier(cs.MEMBER_AREA),
            b.identifier(cs.MEMBER_NAME),
            b.member_access(cs.MEMBER_ACTION_NAMES, action_name),
        )

    def _redirect_methods(self) -> list[MethodDecl]:
        task_type = str(
            TypeRef(
                name=cs.TYPE_TASK,
                type_arguments=(TypeRef(name=self.config.ACTION_RESULT_TYPE),),
            )
        )
        methods: list[MethodDecl] = []
        for name, route_method in (
            (cs.METHOD_REDIRECT_TO_ACTION, cs.METHOD_REDIRECT_TO_ROUTE),
            (cs.METHOD_REDIRECT_TO_ACTION_PERMANENT, cs.METHOD_REDIRECT_TO_ROUTE_PERMANENT),
        ):
            methods.append(
                b.method(
                    name,
                    self.config.REDIRECT_RESULT_TYPE,
                    (cs.Modifier.PROTECTED,),
                    (b.parameter(cs.PARAM_RESULT, self.config.ACTION_RESULT_TYPE),),
                    body=(
                        b.local_variable(
                            cs.LOCAL_CALL_INFO,
                            b.invocation(
                                b.member_access(cs.PARAM_RESULT, cs.METHOD_GET_RESULT)
                            ),
                        ),
                        b.return_statement(
                            b.invocation(
                                route_method,
                                b.member_access(
                                    cs.LOCAL_CALL_INFO, cs.PROPERTY_ROUTE_VALUES
                                ),
                            )
                        ),
                    ),
                    attributes=self.generated_attributes,
                )
            )
            methods.append(
                b.method(
                    name,
                    self.config.REDIRECT_RESULT_TYPE,
                    (cs.Modifier.PROTECTED,),
                    (b.parameter(cs.PARAM_TASK_RESULT, task_type),),
                    body=(
                        b.return_statement(
                            b.invocation(
                                name,
                                b.member_access(
                                    cs.PARAM_TASK_RESULT, cs.PROPERTY_TASK_RESULT
                                ),
                            )
                        ),
                    ),
                    attributes=self.generated_attributes,
                )
            )
        return methods

    def _action_stubs(
        self, controller: ParsedController, actions: Sequence[ParsedMethod]
    ) -> list[MethodDecl]:
        overloads: dict[str, list[ParsedMethod]] = {}
        for action in actions:
            overloads.setdefault(action.name, []).append(action)

        stubs: list[MethodDecl] = []
        for name, group in overloads.items():
            if any(not action.parameters for action in group):
                logger.debug(
                    ls.ACTION_STUB_SUPPRESSED.format(
                        controller=controller.name, action=name
                    )
                )
                continue
            stubs.append(
                b.method(
                    name,
                    self.config.ACTION_RESULT_TYPE,
                    (cs.Modifier.PUBLIC, cs.Modifier.VIRTUAL),
                    body=(b.return_statement(self._call_info(name)),),
                    attributes=(b.non_action_attribute(), *self.generated_attributes),
                )
            )
        return stubs

    def _names_class(
        self, class_name: str, names: Sequence[str], modifier: cs.Modifier
    ) -> ClassDecl:
        builder = self._new_class(class_name, (), cs.Modifier.PUBLIC).with_attributes(
            *self.generated_attributes
        )
        for name in names:
            builder.with_string_field(name, name, False, cs.Modifier.PUBLIC, modifier)
        return builder.build()

    def _override_hook(self, action: ParsedMethod) -> MethodDecl:
        return b.method(
            f"{action.name}{self.config.OVERRIDE_SUFFIX}",
            cs.TYPE_VOID,
            (cs.Modifier.PARTIAL,),
            (
                b.parameter(cs.LOCAL_CALL_INFO, self.config.CALL_INFO_CLASS),
                *_parameters(action),
            ),
            body=None,
            attributes=(b.non_action_attribute(),),
        )

    def _action_override(
        self, controller: ParsedController, action: ParsedMethod
    ) -> MethodDecl:
        call_info = b.identifier(cs.LOCAL_CALL_INFO)
        return b.method(
            action.name,
            str(action.return_type),
            (cs.Modifier.PUBLIC, cs.Modifier.OVERRIDE),
            _parameters(action),
            body=(
                b.local_variable(cs.LOCAL_CALL_INFO, self._call_info(action.name)),
                b.expression_statement(
                    b.invocation(
                        f"{action.name}{self.config.OVERRIDE_SUFFIX}",
                        call_info,
                        *(b.identifier(p.name) for p in action.parameters),
                    )
                ),
                self._return_call_info(controller, action, call_info),
            ),
            attributes=(b.non_action_attribute(),),
        )

    def _return_call_info(
        self, controller: ParsedController, action: ParsedMethod, call_info: Expression
    ) -> ReturnStatement:
        inner = self.unwrap_async_return_type(action.return_type)
        if inner is None:
            return b.return_statement(call_info)

        logger.debug(
            ls.ASYNC_RETURN_UNWRAPPED.format(
                controller=controller.name,
                action=action.name,
                wrapper=action.return_type,
                inner=inner,
            )
        )
        value = AsCast(call_info, str(inner))
        if action.return_type.simple_name == cs.TYPE_VALUE_TASK:
            return b.return_statement(b.object_creation(str(action.return_type), value))
        wrapper_path = action.return_type.name.split(cs.SEPARATOR_DOT)
        return b.return_statement(
            b.invocation(b.member_access(*wrapper_path, cs.METHOD_FROM_RESULT), value)
        )


def _distinct_names(actions: Iterable[ParsedMethod]) -> list[str]:
    return list(dict.fromkeys(action.name for action in actions))


def _parameters(action: ParsedMethod) -> tuple[ParameterDecl, ...]:
    return tuple(b.parameter(p.name, str(p.type)) for p in action.parameters)
