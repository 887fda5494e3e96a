"""no-unnecessary-dependson

Flags explicit ``dependsOn`` entries that duplicate a dependency the compiler
already infers from property references:

    resource web 'Microsoft.Web/sites@2022-03-01' = {
      properties: {
        serverFarmId: plan.id      // inferred dependency on plan
      }
      dependsOn: [
        plan                       // <- redundant
      ]
    }

Entries pointing at a resource or module collection are never flagged; whether
"depends on the whole collection" is implied by references to some of its
members is not decidable by set membership alone.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from deplint.config import RuleConfig
from deplint.diagnostics import CodeFix, CodeReplacement, Diagnostic
from deplint.logging import get_logger
from deplint.ports import DependencyInferenceProvider, InferredDependencyMap, SemanticModelPort
from deplint.rules.base import LinterRule
from deplint.semantics import DeclaredSymbol, ModuleSymbol, ResourceDependency, ResourceSymbol
from deplint.syntax import DEPENDS_ON_PROPERTY_NAME, ArrayItemSyntax, ArraySyntax, ResourceDeclarationSyntax

logger = get_logger(__name__)


@dataclass(frozen=True)
class RedundantDependsOn:
    """An explicit ``dependsOn`` entry already implied by inference."""

    entry: ArrayItemSyntax
    source: DeclaredSymbol
    target: DeclaredSymbol


def find_redundant_depends_on(
    model: SemanticModelPort,
    inferred_dependencies: InferredDependencyMap,
) -> tuple[RedundantDependsOn, ...]:
    """Find every redundant ``dependsOn`` entry of the document, in document order.

    Args:
        model: Semantic model of the document
        inferred_dependencies: Dependencies inferred with explicit ``dependsOn``
            lists ignored. Resources without inferred dependencies must be absent.
    """
    return tuple(
        finding
        for declaration in model.resource_declarations()
        for finding in _check_resource(model, inferred_dependencies, declaration)
    )


def _check_resource(
    model: SemanticModelPort,
    inferred_dependencies: InferredDependencyMap,
    declaration: ResourceDeclarationSyntax,
) -> Iterator[RedundantDependsOn]:
    body = declaration.try_get_body()
    if body is None:
        return

    depends_on = body.get_property_by_name(DEPENDS_ON_PROPERTY_NAME)
    if depends_on is None or not isinstance(depends_on.value, ArraySyntax):
        return

    this_resource = model.get_symbol_info(declaration)
    if this_resource is None:
        return

    # No implicit dependencies: every explicit entry carries information.
    inferred = inferred_dependencies.get(this_resource)
    if inferred is None:
        logger.debug("depends_on_skipped", resource=this_resource.name, reason="no_inferred_dependencies")
        return

    for entry in depends_on.value.items:
        target = model.get_symbol_info(entry.value)
        if not isinstance(target, (ResourceSymbol, ModuleSymbol)):
            continue
        if model.is_resource_collection(target):
            continue
        if _is_inferred(target, inferred):
            yield RedundantDependsOn(entry=entry, source=this_resource, target=target)


def _is_inferred(target: DeclaredSymbol, inferred: Iterable[ResourceDependency]) -> bool:
    return any(dependency.target is target for dependency in inferred)


class NoUnnecessaryDependsOnRule(LinterRule):
    """Reports explicit ``dependsOn`` entries implied by property references."""

    CODE = "no-unnecessary-dependson"
    DESCRIPTION = "No unnecessary dependsOn."
    MESSAGE_TEMPLATE = "Resource dependency '{0}' is redundant because it is already implied by a property reference."
    FIX_TITLE = "Remove unnecessary dependsOn entry"

    def __init__(self, provider: DependencyInferenceProvider, config: RuleConfig | None = None) -> None:
        super().__init__(config)
        self.provider = provider

    def format_message(self, *values: object) -> str:
        return self.MESSAGE_TEMPLATE.format(values[0])

    def analyze_internal(self, model: SemanticModelPort) -> Iterable[Diagnostic]:
        inferred_dependencies = self.provider.compute_inferred_dependencies(model, ignore_explicit_depends_on=True)

        return [
            self.create_diagnostic_for_span(
                finding.entry.span,
                finding.target.name,
                fixes=(self._removal_fix(finding.entry),),
            )
            for finding in find_redundant_depends_on(model, inferred_dependencies)
        ]

    def _removal_fix(self, entry: ArrayItemSyntax) -> CodeFix:
        return CodeFix(
            title=self.FIX_TITLE,
            replacements=(CodeReplacement(span=entry.span, text=""),),
            is_preferred=True,
        )
