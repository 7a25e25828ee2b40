from __future__ import annotations

from loguru import logger

from mvc_codegen.core import constants as cs
from mvc_codegen.core import logs as ls
from mvc_codegen.data_models.declarations import ParsedController, ParsedMethod
from mvc_codegen.data_models.types_defs import QualifiedName
from mvc_codegen.infrastructure import exceptions as ex


class ModelDeclarationQuery:
    """Answers declaration queries straight from the parsed controller records."""

    def resolve_namespace(self, controller: ParsedController) -> QualifiedName:
        namespace = (controller.namespace or "").strip()
        if not namespace:
            raise ex.NamespaceResolutionError(
                ex.NAMESPACE_UNRESOLVED.format(controller=controller.name)
            )
        return namespace

    def action_methods(self, controller: ParsedController) -> list[ParsedMethod]:
        methods: list[ParsedMethod] = []
        for method in controller.methods:
            if method.generated:
                logger.debug(
                    ls.MEMBER_SKIPPED_GENERATED.format(
                        kind="method", controller=controller.name, name=method.name
                    )
                )
                continue
            if (
                method.accessibility != cs.Accessibility.PUBLIC
                or method.kind != cs.MethodKind.ORDINARY
                or method.is_static
            ):
                logger.debug(
                    ls.MEMBER_SKIPPED_NOT_ACTION.format(
                        controller=controller.name, name=method.name
                    )
                )
                continue
            methods.append(method)
        return methods

    def has_public_constructor(self, controller: ParsedController) -> bool:
        return any(
            ctor.accessibility == cs.Accessibility.PUBLIC and not ctor.generated
            for ctor in controller.constructors
        )
