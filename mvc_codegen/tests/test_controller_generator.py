from __future__ import annotations

import pytest

from mvc_codegen.core import constants as cs
from mvc_codegen.core.config import GeneratorSettings
from mvc_codegen.data_models.declarations import (
    ParsedConstructor,
    ParsedController,
    ParsedMethod,
    ParsedParameter,
    TypeRef,
)
from mvc_codegen.data_models.syntax import (
    AsCast,
    ClassDecl,
    ExpressionStatement,
    IdentifierName,
    Invocation,
    Literal,
    LocalDeclaration,
    MemberAccess,
    ObjectCreation,
    ReturnStatement,
)
from mvc_codegen.data_models.views import View
from mvc_codegen.infrastructure.exceptions import NamespaceResolutionError
from mvc_codegen.services import ControllerGenerator
from mvc_codegen.tests.conftest import StaticViewLocator, make_controller, make_method

CALL_INFO = "R4Mvc_Microsoft_AspNetCore_Mvc_ActionResult"


def _call_info(action: str) -> ObjectCreation:
    return ObjectCreation(
        CALL_INFO,
        (
            IdentifierName("Area"),
            IdentifierName("Name"),
            MemberAccess(IdentifierName("ActionNames"), action),
        ),
    )


def _generate_one(
    generator: ControllerGenerator, controller: ParsedController
) -> tuple[ClassDecl, ClassDecl]:
    (namespace,) = generator.generate_controllers([controller])
    partial, r4 = namespace.members
    return partial, r4


@pytest.mark.parametrize(
    ("namespace", "expected"),
    [
        ("App.Areas.Admin.Controllers", "Admin"),
        ("Areas.Billing.Controllers", "Billing"),
        ("App.Areas.Admin.Controllers.Api", "Admin"),
        ("App.Controllers", ""),
        ("App.Areas.Admin", ""),
        ("App.MyAreas.Admin.Controllers", ""),
    ],
)
def test_area_from_namespace(
    generator: ControllerGenerator, namespace: str, expected: str
) -> None:
    assert generator.area_from_namespace(namespace) == expected


def test_controller_naming(generator: ControllerGenerator) -> None:
    home = make_controller("HomeController")
    bare = make_controller("Controller")

    assert generator.get_controller_name(home) == "Home"
    assert generator.get_controller_name(bare) == "Controller"
    assert generator.get_r4_controller_class_name(home) == "R4MVC_HomeController"


def test_get_controller_area(generator: ControllerGenerator) -> None:
    controller = make_controller("UsersController", "Shop.Areas.Admin.Controllers")

    assert generator.get_controller_area(controller) == "Admin"


def test_home_controller_about_action(
    generator: ControllerGenerator, view_locator: StaticViewLocator
) -> None:
    namespaces = generator.generate_controllers(
        [make_controller(methods=[make_method("About")])]
    )

    assert [ns.name for ns in namespaces] == ["App.Controllers"]
    assert [c.name for c in namespaces[0].members] == [
        "HomeController",
        "R4MVC_HomeController",
    ]
    assert view_locator.calls == 1

    partial = namespaces[0].get_class("HomeController")
    assert partial.modifiers == (cs.Modifier.PUBLIC, cs.Modifier.PARTIAL)
    assert partial.get_field("Name").initializer == Literal("Home")
    assert partial.get_field("Area").initializer == Literal("")
    assert partial.get_field("NameConst").modifiers == (
        cs.Modifier.PUBLIC,
        cs.Modifier.CONST,
    )
    names = partial.get_nested_class("ActionNamesClass")
    assert names.get_field("About").initializer == Literal("About")
    assert partial.get_methods("About") == []

    r4 = namespaces[0].get_class("R4MVC_HomeController")
    (override,) = r4.get_methods("About")
    assert override.modifiers == (cs.Modifier.PUBLIC, cs.Modifier.OVERRIDE)
    assert override.return_type == "IActionResult"
    assert override.body == (
        LocalDeclaration("callInfo", _call_info("About")),
        ExpressionStatement(
            Invocation(IdentifierName("AboutOverride"), (IdentifierName("callInfo"),))
        ),
        ReturnStatement(IdentifierName("callInfo")),
    )

    (hook,) = r4.get_methods("AboutOverride")
    assert hook.body is None
    assert hook.modifiers == (cs.Modifier.PARTIAL,)
    assert hook.return_type == cs.TYPE_VOID
    assert [(p.name, p.type_name) for p in hook.parameters] == [("callInfo", CALL_INFO)]


def test_partial_controller_member_order(generator: ControllerGenerator) -> None:
    partial, _ = _generate_one(
        generator, make_controller(methods=[make_method("Details", ("id", "int"))])
    )

    assert [member.name for member in partial.members] == [
        "HomeController",
        "HomeController",
        "RedirectToAction",
        "RedirectToAction",
        "RedirectToActionPermanent",
        "RedirectToActionPermanent",
        "Details",
        "Actions",
        "Area",
        "Name",
        "NameConst",
        "s_actions",
        "ActionNames",
        "ActionNamesClass",
        "ActionNameConstants",
        "s_views",
        "Views",
        "ViewsClass",
    ]


def test_actions_property_points_at_canonical_root(
    generator: ControllerGenerator,
) -> None:
    partial, _ = _generate_one(generator, make_controller())

    actions = partial.get_property("Actions")
    assert actions.type_name == "HomeController"
    assert actions.getter == MemberAccess(IdentifierName("MVC"), "Home")
    assert partial.get_property("ActionNames").getter == IdentifierName("s_actions")
    assert partial.get_field("s_views").initializer == ObjectCreation("ViewsClass")


def test_overloads_share_one_action_name(generator: ControllerGenerator) -> None:
    controller = make_controller(
        methods=[
            make_method("Save", ("id", "int")),
            make_method("Save", ("id", "int"), ("name", "string")),
        ]
    )

    partial, r4 = _generate_one(generator, controller)

    for class_name, modifier in (
        ("ActionNamesClass", cs.Modifier.READONLY),
        ("ActionNameConstants", cs.Modifier.CONST),
    ):
        names = partial.get_nested_class(class_name)
        assert [f.name for f in names.fields] == ["Save"]
        assert names.fields[0].modifiers == (cs.Modifier.PUBLIC, modifier)

    (stub,) = partial.get_methods("Save")
    assert stub.parameters == ()
    assert stub.return_type == "IActionResult"
    assert stub.modifiers == (cs.Modifier.PUBLIC, cs.Modifier.VIRTUAL)
    assert stub.attributes[0].name == cs.ATTR_NON_ACTION
    assert stub.body == (ReturnStatement(_call_info("Save")),)

    assert [m.parameter_types for m in r4.get_methods("Save")] == [
        ("int",),
        ("int", "string"),
    ]
    hooks = r4.get_methods("SaveOverride")
    assert [h.parameter_types for h in hooks] == [
        (CALL_INFO, "int"),
        (CALL_INFO, "int", "string"),
    ]

    override = r4.get_methods("Save")[1]
    assert override.body[1] == ExpressionStatement(
        Invocation(
            IdentifierName("SaveOverride"),
            (IdentifierName("callInfo"), IdentifierName("id"), IdentifierName("name")),
        )
    )


def test_parameterless_overload_suppresses_stub(generator: ControllerGenerator) -> None:
    controller = make_controller(
        methods=[make_method("Edit"), make_method("Edit", ("id", "int"))]
    )

    partial, r4 = _generate_one(generator, controller)

    assert partial.get_methods("Edit") == []
    assert len(r4.get_methods("Edit")) == 2


@pytest.mark.parametrize(
    ("return_type", "expected"),
    [
        (
            "Task<IActionResult>",
            Invocation(
                MemberAccess(IdentifierName("Task"), "FromResult"),
                (AsCast(IdentifierName("callInfo"), "IActionResult"),),
            ),
        ),
        (
            "System.Threading.Tasks.Task<ActionResult<User>>",
            Invocation(
                MemberAccess(
                    MemberAccess(
                        MemberAccess(
                            MemberAccess(IdentifierName("System"), "Threading"), "Tasks"
                        ),
                        "Task",
                    ),
                    "FromResult",
                ),
                (AsCast(IdentifierName("callInfo"), "ActionResult<User>"),),
            ),
        ),
        (
            "ValueTask<IActionResult>",
            ObjectCreation(
                "ValueTask<IActionResult>",
                (AsCast(IdentifierName("callInfo"), "IActionResult"),),
            ),
        ),
        ("IActionResult", IdentifierName("callInfo")),
        ("Task", IdentifierName("callInfo")),
        ("TaskResult", IdentifierName("callInfo")),
        ("ActionResult<Task>", IdentifierName("callInfo")),
        ("Task<IActionResult>[]", IdentifierName("callInfo")),
    ],
)
def test_async_return_is_unwrapped_structurally(
    generator: ControllerGenerator, return_type: str, expected: object
) -> None:
    controller = make_controller(
        methods=[make_method("Details", ("id", "int"), returns=return_type)]
    )

    _, r4 = _generate_one(generator, controller)

    (override,) = r4.get_methods("Details")
    assert override.return_type == str(TypeRef.from_string(return_type))
    assert override.body[-1] == ReturnStatement(expected)


def test_unwrap_async_return_type(generator: ControllerGenerator) -> None:
    assert generator.unwrap_async_return_type(
        TypeRef.from_string("Task<IActionResult>")
    ) == TypeRef(name="IActionResult")
    assert generator.unwrap_async_return_type(TypeRef.from_string("Task")) is None
    assert (
        generator.unwrap_async_return_type(TypeRef.from_string("Tuple<int, int>"))
        is None
    )


def test_non_actions_are_left_out(generator: ControllerGenerator) -> None:
    controller = make_controller(
        methods=[
            make_method("Index"),
            make_method("Helper", accessibility=cs.Accessibility.PRIVATE),
            make_method("Shared", accessibility=cs.Accessibility.PROTECTED),
            make_method("Create", is_static=True),
            make_method("get_Title", kind=cs.MethodKind.PROPERTY_ACCESSOR),
            make_method("Old", generated=True),
        ]
    )

    partial, r4 = _generate_one(generator, controller)

    names = partial.get_nested_class("ActionNamesClass")
    assert [f.name for f in names.fields] == ["Index"]
    assert [m.name for m in r4.methods] == ["IndexOverride", "Index"]


@pytest.mark.parametrize(
    ("constructors", "expect_default"),
    [
        ([], True),
        ([ParsedConstructor(parameter_count=1)], False),
        ([ParsedConstructor(generated=True)], True),
        ([ParsedConstructor(accessibility=cs.Accessibility.PRIVATE)], True),
    ],
)
def test_constructor_rules(
    generator: ControllerGenerator,
    constructors: list[ParsedConstructor],
    expect_default: bool,
) -> None:
    partial, _ = _generate_one(generator, make_controller(constructors=constructors))

    ctors = partial.constructors
    dummy = ctors[-1]
    assert dummy.modifiers == (cs.Modifier.PROTECTED,)
    assert [(p.name, p.type_name) for p in dummy.parameters] == [("d", "Dummy")]
    assert dummy.attributes == generator.generated_attributes

    if expect_default:
        assert len(ctors) == 2
        assert ctors[0].modifiers == (cs.Modifier.PUBLIC,)
        assert ctors[0].parameters == ()
    else:
        assert len(ctors) == 1


def test_redirect_helpers(generator: ControllerGenerator) -> None:
    partial, _ = _generate_one(generator, make_controller())

    redirects = [
        m for m in partial.methods if m.name.startswith("RedirectToAction")
    ]
    assert [(m.name, m.parameter_types) for m in redirects] == [
        ("RedirectToAction", ("IActionResult",)),
        ("RedirectToAction", ("Task<IActionResult>",)),
        ("RedirectToActionPermanent", ("IActionResult",)),
        ("RedirectToActionPermanent", ("Task<IActionResult>",)),
    ]
    assert all(m.modifiers == (cs.Modifier.PROTECTED,) for m in redirects)
    assert all(m.return_type == "RedirectToRouteResult" for m in redirects)

    direct, from_task = redirects[2], redirects[3]
    assert direct.body == (
        LocalDeclaration(
            "callInfo",
            Invocation(MemberAccess(IdentifierName("result"), "GetR4MvcResult")),
        ),
        ReturnStatement(
            Invocation(
                IdentifierName("RedirectToRoutePermanent"),
                (MemberAccess(IdentifierName("callInfo"), "RouteValueDictionary"),),
            )
        ),
    )
    assert from_task.body == (
        ReturnStatement(
            Invocation(
                IdentifierName("RedirectToActionPermanent"),
                (MemberAccess(IdentifierName("taskResult"), "Result"),),
            )
        ),
    )


def test_r4_controller_shape(generator: ControllerGenerator) -> None:
    _, r4 = _generate_one(generator, make_controller(methods=[make_method("Index")]))

    assert r4.name == "R4MVC_HomeController"
    assert r4.modifiers == (cs.Modifier.PUBLIC, cs.Modifier.PARTIAL)
    assert [a.name for a in r4.attributes] == ["GeneratedCode", "DebuggerNonUserCode"]
    assert r4.attributes[0].arguments == (Literal("R4Mvc"), Literal("1.0"))
    assert r4.base_types == ("App.Controllers.HomeController",)

    (ctor,) = r4.constructors
    assert ctor.modifiers == (cs.Modifier.PUBLIC,)
    assert ctor.parameters == ()
    assert ctor.initializer.kind == cs.ConstructorInitializerKind.BASE
    assert ctor.initializer.arguments == (
        MemberAccess(IdentifierName("Dummy"), "Instance"),
    )


def test_generic_controller_keeps_type_parameters(
    generator: ControllerGenerator,
) -> None:
    controller = make_controller("CrudController", type_parameters=("TModel",))

    partial, r4 = _generate_one(generator, controller)

    assert partial.type_parameters == ("TModel",)
    assert r4.type_parameters == ("TModel",)
    assert r4.base_types == ("App.Controllers.CrudController<TModel>",)


def test_area_controller_fields(generator: ControllerGenerator) -> None:
    controller = make_controller("UsersController", "Shop.Areas.Admin.Controllers")

    partial, r4 = _generate_one(generator, controller)

    assert partial.get_field("Area").initializer == Literal("Admin")
    assert partial.get_field("Name").initializer == Literal("Users")
    assert r4.base_types == ("Shop.Areas.Admin.Controllers.UsersController",)


def test_views_are_located_once_and_shared(config: GeneratorSettings) -> None:
    locator = StaticViewLocator(
        [
            View.create(
                "Index",
                "/src/Pages/Admin/Users/Index.cshtml",
                "/Pages/Admin/Users/Index.cshtml",
                "/Admin/Users/Index",
                True,
            )
        ]
    )
    generator = ControllerGenerator(locator, config=config)

    (namespace,) = generator.generate_controllers(
        [make_controller("HomeController"), make_controller("AccountController")]
    )

    assert locator.calls == 1
    home = namespace.get_class("HomeController").get_nested_class("ViewsClass")
    account = namespace.get_class("AccountController").get_nested_class("ViewsClass")
    assert home is account
    pages = home.get_nested_class(cs.CLASS_PAGES)
    index = pages.get_nested_class("Admin").get_nested_class("Users").get_field("Index")
    assert index.initializer == Literal("/Admin/Users/Index")


def test_view_hierarchy_mirrors_segments(config: GeneratorSettings) -> None:
    locator = StaticViewLocator(
        [
            View.create(
                "Index",
                "/src/Views/Admin/Users/Index.cshtml",
                "/Views/Admin/Users/Index.cshtml",
                "/Admin/Users/Index",
                False,
            )
        ]
    )
    generator = ControllerGenerator(locator, config=config)

    partial = generator.generate_partial_controller(make_controller())

    views_class = partial.get_nested_class("ViewsClass")
    users = views_class.get_nested_class("Admin").get_nested_class("Users")
    assert users.get_field("Index").initializer == Literal(
        "~/Views/Admin/Users/Index.cshtml"
    )


def test_partial_controller_locates_views_when_not_given(
    generator: ControllerGenerator, view_locator: StaticViewLocator
) -> None:
    partial = generator.generate_partial_controller(make_controller())

    assert view_locator.calls == 1
    assert partial.get_nested_class("ViewsClass") is not None


def test_namespaces_are_grouped_in_first_seen_order(
    generator: ControllerGenerator,
) -> None:
    namespaces = generator.generate_controllers(
        [
            make_controller("HomeController", "App.Controllers"),
            make_controller("UsersController", "App.Areas.Admin.Controllers"),
            make_controller("AccountController", "App.Controllers"),
        ]
    )

    assert [ns.name for ns in namespaces] == [
        "App.Controllers",
        "App.Areas.Admin.Controllers",
    ]
    assert [c.name for c in namespaces[0].members] == [
        "HomeController",
        "R4MVC_HomeController",
        "AccountController",
        "R4MVC_AccountController",
    ]


@pytest.mark.parametrize("namespace", [None, "", "   "])
def test_unresolved_namespace_fails_before_generation(
    generator: ControllerGenerator,
    view_locator: StaticViewLocator,
    namespace: str | None,
) -> None:
    controllers = [make_controller(), make_controller("OrphanController", namespace)]

    with pytest.raises(NamespaceResolutionError):
        generator.generate_controllers(controllers)
    assert view_locator.calls == 0


def test_no_controllers_generate_nothing(
    generator: ControllerGenerator, view_locator: StaticViewLocator
) -> None:
    assert generator.generate_controllers([]) == []
    assert view_locator.calls == 0


def _with_generated_members(
    controller: ParsedController, partial: ClassDecl
) -> ParsedController:
    """Feeds a pass's output back in, the way a re-parse of the sources would."""
    constructors = [
        ParsedConstructor(
            accessibility=(
                cs.Accessibility.PUBLIC
                if cs.Modifier.PUBLIC in ctor.modifiers
                else cs.Accessibility.PROTECTED
            ),
            parameter_count=len(ctor.parameters),
            generated=True,
        )
        for ctor in partial.constructors
    ]
    methods = [
        ParsedMethod(
            name=method.name,
            parameters=[
                ParsedParameter(name=p.name, type=p.type_name) for p in method.parameters
            ],
            return_type=method.return_type,
            accessibility=(
                cs.Accessibility.PUBLIC
                if cs.Modifier.PUBLIC in method.modifiers
                else cs.Accessibility.PROTECTED
            ),
            generated=True,
        )
        for method in partial.methods
    ]
    return controller.model_copy(
        update={
            "constructors": (*controller.constructors, *constructors),
            "methods": (*controller.methods, *methods),
        }
    )


def test_regeneration_is_idempotent(generator: ControllerGenerator) -> None:
    controller = make_controller(
        methods=[
            make_method("Index"),
            make_method("Save", ("id", "int")),
            make_method("Save", ("id", "int"), ("name", "string")),
            make_method("Details", ("id", "int"), returns="Task<IActionResult>"),
        ]
    )
    first = generator.generate_controllers([controller])
    partial = first[0].get_class("HomeController")

    second = generator.generate_controllers(
        [_with_generated_members(controller, partial)]
    )

    assert second == first
    assert len(partial.get_methods("Save")) == 1
